from __future__ import annotations

from typing import Callable, List

from loguru import logger

from post_excerpt.config import settings
from post_excerpt.content.models import ContentItem, EditorWidget, MetaBox
from post_excerpt.editor.settings import editable_excerpt, editor_settings
from post_excerpt.host import EditorFactory, MetaBoxRegistry
from post_excerpt.hooks import HookRegistry

POST_TYPES_FILTER = "ape_post_types"
EXCERPT_META_BOX_ID = "postexcerpt"


def render_metabox(item: ContentItem, *, editor: EditorFactory, hooks: HookRegistry) -> EditorWidget:
    return editor(editable_excerpt(item.excerpt), settings.EXCERPT_EDITOR_ID, editor_settings(hooks))


def excerpt_post_types(hooks: HookRegistry, post_types_by_support: Callable[[str], List[str]]) -> List[str]:
    return list(hooks.apply_filters(POST_TYPES_FILTER, post_types_by_support("excerpt")))


def replace_metabox(
    meta_boxes: MetaBoxRegistry,
    hooks: HookRegistry,
    post_types_by_support: Callable[[str], List[str]],
    *,
    editor: EditorFactory,
    title: str = "Excerpt",
) -> MetaBox:
    """
    Swap the default excerpt meta box for one backed by the rich editor,
    on every post type that supports excerpts.
    """
    post_types = excerpt_post_types(hooks, post_types_by_support)

    meta_boxes.remove_meta_box(EXCERPT_META_BOX_ID, post_types, "normal")

    box = MetaBox(
        id=EXCERPT_META_BOX_ID,
        title=title,
        callback=lambda item: render_metabox(item, editor=editor, hooks=hooks),
        screens=post_types,
        context="normal",
        priority="high",
        callback_args={"__back_compat_meta_box": False},
    )
    meta_boxes.add_meta_box(box)
    logger.info(f"excerpt meta box replaced for post types: {post_types}")
    return box
