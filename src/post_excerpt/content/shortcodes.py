from __future__ import annotations

import re
from typing import Any, Callable, Dict, Final, Mapping, Optional

from loguru import logger

ShortcodeHandler = Callable[[Dict[Any, str], Optional[str], str], Any]

_INVALID_TAG_RE: Final[re.Pattern[str]] = re.compile(r"[<>&/\[\]\x00-\x20=]")

_ATTR_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ([\w-]+)\s*=\s*"([^"]*)"(?:\s|$)      # name="value"
    |([\w-]+)\s*=\s*'([^']*)'(?:\s|$)     # name='value'
    |([\w-]+)\s*=\s*([^\s'"]+)(?:\s|$)    # name=value
    |"([^"]*)"(?:\s|$)                    # "positional"
    |'([^']*)'(?:\s|$)                    # 'positional'
    |(\S+)(?:\s|$)                        # positional
    """,
    flags=re.VERBOSE,
)

_NBSP_RE: Final[re.Pattern[str]] = re.compile(r"[\u00a0\u200b]+")


def _tag_regex(tagnames: list[str]) -> re.Pattern[str]:
    """
    Groups:
      1: extra "[" for escaping      4: "/" of a self-closing tag
      2: tag name                    5: enclosed content
      3: attribute text              6: extra "]" for escaping
    """
    alternation = "|".join(re.escape(t) for t in tagnames)
    return re.compile(
        r"\[(\[?)"
        rf"({alternation})"
        r"(?![\w-])"
        r"([^\]/]*(?:/(?!\])[^\]/]*)*)"
        r"(?:(/)\]|\](?:([^\[]*(?:\[(?!/\2\])[^\[]*)*)\[/\2\])?)"
        r"(\]?)",
        flags=re.DOTALL,
    )


def parse_atts(text: str) -> Dict[Any, str]:
    """
    Parse the attribute part of an opening tag.
    Named attributes get lower-cased keys, positional ones get 0, 1, 2 …
    """
    text = _NBSP_RE.sub(" ", text)
    atts: Dict[Any, str] = {}
    position = 0
    for m in _ATTR_RE.finditer(text):
        if m.group(1) is not None:
            atts[m.group(1).lower()] = m.group(2)
        elif m.group(3) is not None:
            atts[m.group(3).lower()] = m.group(4)
        elif m.group(5) is not None:
            atts[m.group(5).lower()] = m.group(6)
        else:
            value = next(v for v in (m.group(7), m.group(8), m.group(9)) if v is not None)
            atts[position] = value
            position += 1
    return atts


def shortcode_atts(defaults: Mapping[str, Any], atts: Mapping[Any, Any]) -> Dict[str, Any]:
    """Merge user attributes into known defaults; unknown keys are dropped."""
    return {name: atts.get(name, default) for name, default in defaults.items()}


class ShortcodeRegistry:
    """Bracketed `[name …]` directives and the callables that expand them."""

    def __init__(self) -> None:
        self._handlers: Dict[str, ShortcodeHandler] = {}

    def add(self, tag: str, handler: ShortcodeHandler) -> None:
        if not tag.strip():
            logger.warning("Invalid shortcode name: empty name given.")
            return
        if _INVALID_TAG_RE.search(tag):
            logger.warning(f"Invalid shortcode name: {tag!r}. Do not use spaces or reserved characters: & / < > [ ] =")
            return
        self._handlers[tag] = handler

    def remove(self, tag: str) -> None:
        self._handlers.pop(tag, None)

    def exists(self, tag: str) -> bool:
        return tag in self._handlers

    def tags(self) -> list[str]:
        return list(self._handlers)

    def _regex_for(self, text: str) -> Optional[re.Pattern[str]]:
        if "[" not in text or not self._handlers:
            return None
        present = [t for t in self._handlers if f"[{t}" in text]
        if not present:
            return None
        # longest first so "[foo-bar]" never matches a shorter "foo"
        present.sort(key=len, reverse=True)
        return _tag_regex(present)

    def expand(self, text: str) -> str:
        """Replace every registered shortcode in `text` with its rendered output."""
        regex = self._regex_for(text)
        if regex is None:
            return text
        return regex.sub(self._render_match, text)

    def strip(self, text: str) -> str:
        """Remove registered shortcodes, keeping escaped ones as literal text."""
        regex = self._regex_for(text)
        if regex is None:
            return text

        def _strip(m: re.Match[str]) -> str:
            if m.group(1) == "[" and m.group(6) == "]":
                return m.group(0)[1:-1]
            return m.group(1) + m.group(6)

        return regex.sub(_strip, text)

    def _render_match(self, m: re.Match[str]) -> str:
        if m.group(1) == "[" and m.group(6) == "]":
            return m.group(0)[1:-1]  # [[tag]] → [tag]

        tag = m.group(2)
        atts = parse_atts(m.group(3))
        result = self._handlers[tag](atts, m.group(5), tag)
        logger.debug(f"shortcode [{tag}] expanded with atts={atts}")
        return m.group(1) + ("" if result is None else str(result)) + m.group(6)
