from __future__ import annotations

from typing import Any, Callable, Optional

from loguru import logger

from post_excerpt.config import settings
from post_excerpt.content.formatting import autop as default_autop
from post_excerpt.content.models import BlockDescriptor, RenderContext, RequestContext
from post_excerpt.content.shortcodes import ShortcodeRegistry
from post_excerpt.hooks import HookRegistry

RENDER_BLOCK_HOOK = "render_block"


def render_post_excerpt(
    fragment: Any,
    block: BlockDescriptor,
    context: RenderContext,
    *,
    shortcodes: ShortcodeRegistry,
    autop: Callable[[str], str] = default_autop,
    block_name: str = settings.EXCERPT_BLOCK_NAME,
) -> Any:
    """
    Decide what the post-excerpt block should emit.

    Only a post-excerpt block rendered on a single view, inside the loop of
    the main query, gets the custom excerpt. Archives, secondary queries and
    other blocks get the fragment back as is.

    Returns:
      • the untouched fragment when the policy does not apply
      • "" when there is no item or its excerpt is empty (blank or "0")
      • autop(shortcodes.expand(excerpt)) otherwise
    """
    if not isinstance(fragment, str):
        return fragment

    if block.name != block_name:
        return fragment

    if not context.is_primary_single_view:
        logger.debug(
            f"{block_name}: default output kept (singular={context.is_singular}, "
            f"in_the_loop={context.in_the_loop}, main_query={context.is_main_query})"
        )
        return fragment

    item = context.resolve_item()
    if item is None:
        logger.debug(f"{block_name}: no current item, suppressing output")
        return ""

    excerpt = item.excerpt or ""
    if not excerpt.strip() or excerpt == "0":  # "0" is empty too
        logger.debug(f"{block_name}: item {item.id} has an empty excerpt")
        return ""

    return autop(shortcodes.expand(excerpt))


class ExcerptRenderGate:
    """
    Installs the excerpt policy on the render_block hook, but only for
    requests serving a single view of the configured post type.
    """

    def __init__(
        self,
        hooks: HookRegistry,
        shortcodes: ShortcodeRegistry,
        context_provider: Callable[[], RenderContext],
        *,
        post_type: str = settings.SINGULAR_POST_TYPE,
        priority: int = settings.RENDER_FILTER_PRIORITY,
        autop: Callable[[str], str] = default_autop,
    ) -> None:
        self.hooks = hooks
        self.shortcodes = shortcodes
        self.context_provider = context_provider
        self.post_type = post_type
        self.priority = priority
        self.autop = autop

    def render_block(self, fragment: Optional[str], block: BlockDescriptor) -> Any:
        return render_post_excerpt(
            fragment,
            block,
            self.context_provider(),
            shortcodes=self.shortcodes,
            autop=self.autop,
        )

    def apply(self, request: RequestContext) -> bool:
        if not request.is_singular_of(self.post_type):
            return False
        self.hooks.add_filter(RENDER_BLOCK_HOOK, self.render_block, self.priority, 2)
        logger.info(f"excerpt render filter installed for singular '{self.post_type}' request")
        return True
