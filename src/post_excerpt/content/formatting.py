from __future__ import annotations

import re
from typing import Final, List

BLOCK_TAGS: Final[frozenset[str]] = frozenset({
    "address", "article", "aside", "blockquote", "caption", "col", "colgroup", "dd", "details",
    "div", "dl", "dt", "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2", "h3",
    "h4", "h5", "h6", "header", "hgroup", "hr", "legend", "li", "map", "math", "menu", "nav",
    "ol", "p", "pre", "section", "style", "summary", "table", "tbody", "td", "tfoot", "th",
    "thead", "tr", "ul",
})
_ALLBLOCKS: Final[str] = "|".join(sorted(BLOCK_TAGS, key=len, reverse=True))

_PRE_RE: Final[re.Pattern[str]] = re.compile(r"<pre[\s>].*?</pre>", flags=re.DOTALL | re.IGNORECASE)
_BLOCK_OPEN_RE: Final[re.Pattern[str]] = re.compile(rf"(<(?:{_ALLBLOCKS})(?=[\s/>]))", flags=re.IGNORECASE)
_BLOCK_CLOSE_RE: Final[re.Pattern[str]] = re.compile(rf"(</(?:{_ALLBLOCKS})\s*>)", flags=re.IGNORECASE)
_HR_RE: Final[re.Pattern[str]] = re.compile(r"(<hr\b[^>]*>)", flags=re.IGNORECASE)
_BLOCK_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"\n\s*\n")
_LEADING_TAG_RE: Final[re.Pattern[str]] = re.compile(r"<\s*/?\s*([a-zA-Z][a-zA-Z0-9]*)")
_PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(r"<pre data-autop=\"(\d+)\"></pre>")


def _starts_with_block_tag(block: str) -> bool:
    m = _LEADING_TAG_RE.match(block)
    return bool(m) and m.group(1).lower() in BLOCK_TAGS


def _protect_pre(text: str) -> tuple[str, List[str]]:
    saved: List[str] = []

    def _stash(m: re.Match[str]) -> str:
        saved.append(m.group(0))
        return f'<pre data-autop="{len(saved) - 1}"></pre>'

    return _PRE_RE.sub(_stash, text), saved


def _isolate_block_tags(text: str) -> str:
    """Put a blank line before every opening block tag and after every closing one (and <hr>)."""
    text = _BLOCK_OPEN_RE.sub(r"\n\n\1", text)
    text = _BLOCK_CLOSE_RE.sub(r"\1\n\n", text)
    return _HR_RE.sub(r"\1\n\n", text)


def _paragraph(text: str, br: bool) -> str:
    if br:
        text = "<br />\n".join(line.strip() for line in text.split("\n"))
    return f"<p>{text}</p>"


def autop(text: str, br: bool = True) -> str:
    """
    Wrap bare text blocks in <p>…</p>:
      • blocks are separated by one or more blank lines
      • block-level elements always start their own block and are kept as is
      • with `br`, single newlines inside a paragraph become <br />
      • <pre> contents are never touched
    """
    if not text or not text.strip():
        return ""

    text, saved = _protect_pre(text.replace("\r\n", "\n").replace("\r", "\n"))
    text = _isolate_block_tags(text)

    out: List[str] = []
    for block in _BLOCK_SPLIT_RE.split(text.strip()):
        block = block.strip()
        if not block:
            continue
        if _starts_with_block_tag(block):
            out.append(block)
            continue
        # only a closing block tag can follow bare text here
        m = _BLOCK_CLOSE_RE.search(block)
        if m is None:
            out.append(_paragraph(block, br))
            continue
        bare = block[: m.start()].strip()
        out.append((_paragraph(bare, br) if bare else "") + block[m.start():])

    html = "\n".join(out)
    if saved:
        html = _PLACEHOLDER_RE.sub(lambda m: saved[int(m.group(1))], html)
    return html
