"""
Host collaborators the plugin talks to, plus in-memory stand-ins.

The real host owns meta boxes, the rich text editor, script queues and
translations; the plugin only calls into them through these protocols.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol

from loguru import logger

from post_excerpt.content.models import EditorWidget, MetaBox


class MetaBoxRegistry(Protocol):
    def remove_meta_box(self, box_id: str, screens: Iterable[str], context: str) -> None: ...

    def add_meta_box(self, box: MetaBox) -> None: ...


class EditorFactory(Protocol):
    def __call__(self, content: str, editor_id: str, settings: Dict[str, Any]) -> EditorWidget: ...


class ScriptRegistry(Protocol):
    def enqueue_script(
        self,
        handle: str,
        src: str,
        deps: Iterable[str] = (),
        version: Optional[str] = None,
        in_footer: bool = False,
    ) -> None: ...


class TranslationLoader(Protocol):
    def load_textdomain(self, domain: str, path: Path) -> bool: ...


class Host(Protocol):
    """The slice of the host the plugin uses."""

    meta_boxes: MetaBoxRegistry
    editor: EditorFactory
    scripts: ScriptRegistry
    translations: TranslationLoader
    plugins_url: str

    def translate(self, text: str, context: str, domain: str) -> str: ...

    def post_types_by_support(self, feature: str) -> List[str]: ...


# ──────────────────────────────────────────────────────────────────────────────
# In-memory implementations
# ──────────────────────────────────────────────────────────────────────────────
class InMemoryMetaBoxes:
    def __init__(self) -> None:
        # (screen, context) → {box_id: MetaBox}
        self.boxes: Dict[tuple[str, str], Dict[str, MetaBox]] = {}

    def remove_meta_box(self, box_id: str, screens: Iterable[str], context: str) -> None:
        for screen in screens:
            self.boxes.get((screen, context), {}).pop(box_id, None)

    def add_meta_box(self, box: MetaBox) -> None:
        for screen in box.screens:
            self.boxes.setdefault((screen, box.context), {})[box.id] = box

    def get(self, screen: str, context: str, box_id: str) -> Optional[MetaBox]:
        return self.boxes.get((screen, context), {}).get(box_id)


class TextareaEditor:
    """Plain <textarea> editor; honours `teeny`, `media_buttons` and `textarea_rows`."""

    def __call__(self, content: str, editor_id: str, settings: Dict[str, Any]) -> EditorWidget:
        classes = ["wp-editor-area"]
        if settings.get("teeny"):
            classes.append("teeny")
        rows = int(settings.get("textarea_rows", 5))
        parts = []
        if settings.get("media_buttons", True):
            parts.append(f'<div id="wp-{escape(editor_id)}-media-buttons" class="wp-media-buttons"></div>')
        parts.append(
            f'<textarea class="{" ".join(classes)}" rows="{rows}" '
            f'id="{escape(editor_id)}" name="{escape(settings.get("textarea_name", editor_id))}">'
            f"{escape(content, quote=False)}</textarea>"
        )
        return EditorWidget(content=content, editor_id=editor_id, settings=dict(settings), html="".join(parts))


@dataclass(slots=True)
class EnqueuedScript:
    handle: str
    src: str
    deps: List[str] = field(default_factory=list)
    version: Optional[str] = None
    in_footer: bool = False


class InMemoryScripts:
    def __init__(self) -> None:
        self.queue: Dict[str, EnqueuedScript] = {}

    def enqueue_script(
        self,
        handle: str,
        src: str,
        deps: Iterable[str] = (),
        version: Optional[str] = None,
        in_footer: bool = False,
    ) -> None:
        if handle in self.queue:
            return
        self.queue[handle] = EnqueuedScript(handle, src, list(deps), version, in_footer)


class InMemoryTranslations:
    def __init__(self) -> None:
        self.loaded: Dict[str, Path] = {}

    def load_textdomain(self, domain: str, path: Path) -> bool:
        self.loaded[domain] = path
        logger.debug(f"textdomain '{domain}' loaded from {path}")
        return True


@dataclass
class InMemoryHost:
    """Everything the plugin needs from its host, wired in memory."""

    meta_boxes: InMemoryMetaBoxes = field(default_factory=InMemoryMetaBoxes)
    editor: EditorFactory = field(default_factory=TextareaEditor)
    scripts: InMemoryScripts = field(default_factory=InMemoryScripts)
    translations: InMemoryTranslations = field(default_factory=InMemoryTranslations)
    post_type_supports: Dict[str, List[str]] = field(
        default_factory=lambda: {"post": ["title", "editor", "excerpt"], "page": ["title", "editor"]}
    )
    plugins_url: str = "https://example.org/wp-content/plugins/advanced-post-excerpt"
    translate: Callable[[str, str, str], str] = lambda text, context, domain: text

    def post_types_by_support(self, feature: str) -> List[str]:
        return [pt for pt, features in self.post_type_supports.items() if feature in features]
