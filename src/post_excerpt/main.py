from post_excerpt.content.models import BlockDescriptor, ContentItem, RenderContext, RequestContext
from post_excerpt.content.renderer import RENDER_BLOCK_HOOK
from post_excerpt.content.shortcodes import ShortcodeRegistry
from post_excerpt.host import InMemoryHost
from post_excerpt.hooks import HookRegistry
from post_excerpt.plugin import AdvancedPostExcerpt
from post_excerpt.tools.logger import logger, setup_logging


def main() -> None:
    setup_logging()

    hooks = HookRegistry()
    shortcodes = ShortcodeRegistry()
    shortcodes.add("bold", lambda atts, content, tag: f"<b>{shortcodes.expand(content or '')}</b>")

    item = ContentItem(id=1, type="post", excerpt="Hello [bold]world[/bold]\n\nSecond paragraph.")
    context = RenderContext.for_item(item, is_singular=True, in_the_loop=True, is_main_query=True)

    plugin = AdvancedPostExcerpt(InMemoryHost(), hooks, shortcodes, lambda: context)
    plugin.register()
    hooks.do_action("init")
    plugin.on_request(RequestContext(is_singular=True, post_type="post"))

    html = hooks.apply_filters(
        RENDER_BLOCK_HOOK, "<p>default excerpt</p>", BlockDescriptor("core/post-excerpt")
    )
    logger.success(f"Rendered excerpt:\n{html}")


if __name__ == "__main__":
    main()
