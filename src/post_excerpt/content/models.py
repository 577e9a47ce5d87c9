from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional


@dataclass(slots=True)
class ContentItem:
    id: int
    type: str = "post"
    excerpt: str = ""


def _no_item() -> Optional[ContentItem]:
    return None


@dataclass(frozen=True, slots=True)
class RenderContext:
    """
    Per-render flags supplied by the host:
      • is_singular  : single canonical view of one item (not a listing)
      • in_the_loop  : rendering inside the primary content loop
      • is_main_query: the request's primary query (not a widget query)
    """
    is_singular: bool = False
    in_the_loop: bool = False
    is_main_query: bool = False
    resolve_item: Callable[[], Optional[ContentItem]] = _no_item

    @property
    def is_primary_single_view(self) -> bool:
        return self.is_singular and self.in_the_loop and self.is_main_query

    @classmethod
    def for_item(cls, item: Optional[ContentItem], **flags: bool) -> "RenderContext":
        return cls(resolve_item=lambda: item, **flags)


@dataclass(frozen=True, slots=True)
class BlockDescriptor:
    name: Optional[str]
    attrs: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RequestContext:
    is_singular: bool = False
    post_type: Optional[str] = None

    def is_singular_of(self, post_type: str) -> bool:
        return self.is_singular and self.post_type == post_type


@dataclass(slots=True)
class MetaBox:
    id: str
    title: str
    callback: Callable[..., Any]
    screens: List[str] = None
    context: str = "advanced"
    priority: str = "default"
    callback_args: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if self.screens is None:
            self.screens = []


@dataclass(slots=True)
class EditorWidget:
    content: str
    editor_id: str
    settings: Dict[str, Any]
    html: str = ""
