from __future__ import annotations

from typing import Final, List

from post_excerpt.config import settings

TEENY_BUTTONS_FILTER = "teeny_mce_buttons"
ALIGNMENT_BUTTONS: Final[frozenset[str]] = frozenset({"alignleft", "aligncenter", "alignright"})


def remove_alignment_buttons(buttons: List[str], editor_id: str) -> List[str]:
    """
    Drop the alignment actions from the excerpt editor toolbar.
    Other editor instances get their buttons back untouched.
    """
    if editor_id != settings.EXCERPT_EDITOR_ID:
        return buttons
    return [b for b in buttons if b not in ALIGNMENT_BUTTONS]
