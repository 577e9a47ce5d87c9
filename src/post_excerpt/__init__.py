from post_excerpt.config import Settings, settings
from post_excerpt.content import (
    BlockDescriptor, ContentItem, ExcerptRenderGate, RenderContext, RequestContext,
    ShortcodeRegistry, autop, render_post_excerpt,
)
from post_excerpt.hooks import HookRegistry
from post_excerpt.plugin import AdvancedPostExcerpt

__version__ = settings.PLUGIN_VERSION

__all__ = [
    "Settings", "settings",
    "BlockDescriptor", "ContentItem", "ExcerptRenderGate", "RenderContext", "RequestContext",
    "ShortcodeRegistry", "autop", "render_post_excerpt",
    "HookRegistry", "AdvancedPostExcerpt",
]
