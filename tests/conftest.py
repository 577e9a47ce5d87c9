import pytest

from post_excerpt.content.models import ContentItem, RenderContext
from post_excerpt.content.shortcodes import ShortcodeRegistry
from post_excerpt.host import InMemoryHost
from post_excerpt.hooks import HookRegistry


@pytest.fixture
def hooks() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def shortcodes() -> ShortcodeRegistry:
    registry = ShortcodeRegistry()
    registry.add("bold", lambda atts, content, tag: f"<b>{registry.expand(content or '')}</b>")
    return registry


@pytest.fixture
def host() -> InMemoryHost:
    return InMemoryHost()


def _single_view(item: ContentItem | None) -> RenderContext:
    return RenderContext.for_item(item, is_singular=True, in_the_loop=True, is_main_query=True)


@pytest.fixture
def single_view():
    return _single_view
