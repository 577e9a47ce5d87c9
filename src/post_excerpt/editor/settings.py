from __future__ import annotations

from html import unescape
from typing import Any, Dict

from post_excerpt.hooks import HookRegistry

EDITOR_SETTINGS_FILTER = "ape_editor_settings"

DEFAULT_EDITOR_SETTINGS: Dict[str, Any] = {
    "media_buttons": False,
    "teeny": True,
}


def editor_settings(hooks: HookRegistry) -> Dict[str, Any]:
    """Settings for the excerpt editor, after `ape_editor_settings` filters ran."""
    return hooks.apply_filters(EDITOR_SETTINGS_FILTER, dict(DEFAULT_EDITOR_SETTINGS))


def editable_excerpt(raw: str | None) -> str:
    # stored excerpts keep entities encoded; the editor wants real characters
    return unescape(raw or "")
