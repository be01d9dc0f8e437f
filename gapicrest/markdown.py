"""Rendering of Markdown doc comments as plain text."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from markdown_it import MarkdownIt
from markdown_it.token import Token

_log = logging.getLogger(__name__)

_LINK_PARSER = re.compile(r"""<a\s+href=["'](.+)["']""")
_REFERENCE_PARSER = re.compile(r"\[([a-zA-Z1-9._]+)\]\[[a-zA-Z1-9._]*\]")

_PARSER = MarkdownIt("commonmark", {"html": True})

_IGNORED = frozenset(
    {
        "paragraph_open",
        "list_item_close",
        "heading_open",
        "heading_close",
        "strong_open",
        "strong_close",
    }
)


class _PlainRenderer:
    def __init__(self) -> None:
        self._parts: list[str] = []
        self._link_targets: list[str] = []
        self._list_level = 0
        self._link_open = False

    def render(self, tokens: Iterable[Token]) -> str:
        for token in tokens:
            self._plain(token)
        return "".join(self._parts).strip()

    def _indent(self) -> None:
        self._parts.append("  " * self._list_level)

    def _close_link(self) -> None:
        if self._link_targets:
            self._parts.append(f" (at {self._link_targets.pop()})")

    def _plain(self, token: Token) -> None:
        kind = token.type
        if kind in _IGNORED:
            return
        if kind == "inline":
            for child in token.children or ():
                self._plain(child)
        elif kind == "text":
            # Reference links like [Foo][bar.Foo] are reduced to their text.
            self._parts.append(_REFERENCE_PARSER.sub(r"\1", token.content))
        elif kind == "code_inline":
            self._parts.append(token.content)
        elif kind == "softbreak":
            if self._link_open:
                return
            self._parts.append("\n")
            self._indent()
        elif kind == "paragraph_close":
            self._parts.append("\n\n")
        elif kind == "link_open":
            self._link_targets.append(str(token.attrGet("href") or ""))
        elif kind == "link_close":
            self._close_link()
        elif kind == "html_inline":
            self._html(token.content)
        elif kind == "bullet_list_open":
            self._list_level += 1
        elif kind == "bullet_list_close":
            self._list_level -= 1
        elif kind == "list_item_open":
            self._indent()
        else:
            _log.debug("unhandled type: %s", kind)

    def _html(self, content: str) -> None:
        if content == "<br>":
            self._parts.append("\n")
            return
        match = _LINK_PARSER.search(content)
        if match:
            self._link_targets.append(match.group(1))
            self._link_open = True
        elif content == "</a>":
            self._close_link()
            self._link_open = False


def md_plain(text: str) -> str:
    """Render Markdown (with inline HTML) as indented plain text."""
    return _PlainRenderer().render(_PARSER.parse(text))