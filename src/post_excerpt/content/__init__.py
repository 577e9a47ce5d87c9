from post_excerpt.content.formatting import autop
from post_excerpt.content.models import (
    BlockDescriptor, ContentItem, EditorWidget, MetaBox, RenderContext, RequestContext,
)
from post_excerpt.content.renderer import ExcerptRenderGate, render_post_excerpt
from post_excerpt.content.shortcodes import ShortcodeRegistry, parse_atts, shortcode_atts

__all__ = [
    "BlockDescriptor", "ContentItem", "EditorWidget", "MetaBox", "RenderContext", "RequestContext",
    "autop",
    "ShortcodeRegistry", "parse_atts", "shortcode_atts",
    "ExcerptRenderGate", "render_post_excerpt",
]
