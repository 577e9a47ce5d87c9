from post_excerpt.editor.metabox import EXCERPT_META_BOX_ID, render_metabox, replace_metabox
from post_excerpt.editor.settings import DEFAULT_EDITOR_SETTINGS, editable_excerpt, editor_settings
from post_excerpt.editor.toolbar import ALIGNMENT_BUTTONS, remove_alignment_buttons

__all__ = [
    "EXCERPT_META_BOX_ID", "render_metabox", "replace_metabox",
    "DEFAULT_EDITOR_SETTINGS", "editable_excerpt", "editor_settings",
    "ALIGNMENT_BUTTONS", "remove_alignment_buttons",
]
