"""Parsers for the destination and title parts of inline links."""

from __future__ import annotations

from dataclasses import dataclass

from mdforge.utils import unescape_all

_MAX_PAREN_DEPTH = 32
_TITLE_CLOSERS = {'"': '"', "'": "'", "(": ")"}


@dataclass(frozen=True)
class ParseLinkFragmentResult:
    """Outcome of parsing a link fragment."""

    pos: int
    """Index just past the parsed fragment."""
    lines: int
    """Number of line breaks inside the fragment."""
    text: str
    """Unescaped content of the fragment."""


def _parse_bracketed_destination(
    text: str, start: int, maximum: int
) -> ParseLinkFragmentResult | None:
    chars = iter(text[start + 1 : maximum])
    pos = start + 1
    for ch in chars:
        if ch in "\n<":
            return None
        if ch == ">":
            return ParseLinkFragmentResult(
                pos=pos + 1, lines=0, text=unescape_all(text[start + 1 : pos])
            )
        if ch == "\\":
            if next(chars, None) is None:
                return None
            pos += 2
        else:
            pos += 1
    return None


def _parse_bare_destination(
    text: str, start: int, maximum: int
) -> ParseLinkFragmentResult | None:
    chars = iter(text[start:maximum])
    pos = start
    level = 0
    for ch in chars:
        if ch <= " " or ch == "\x7f":
            break
        if ch == "\\":
            escaped = next(chars, None)
            if escaped is None or escaped == " ":
                break
            pos += 2
        elif ch == "(":
            level += 1
            if level > _MAX_PAREN_DEPTH:
                return None
            pos += 1
        elif ch == ")":
            if level == 0:
                break
            level -= 1
            pos += 1
        else:
            pos += 1

    if level != 0:
        return None
    return ParseLinkFragmentResult(pos=pos, lines=0, text=unescape_all(text[start:pos]))


def parse_link_destination(
    text: str, start: int, maximum: int
) -> ParseLinkFragmentResult | None:
    """Parse the ``<href>`` or bare ``href`` part of a link found at ``start``.

    Only ``text[start:maximum]`` is examined. Returns ``None`` if no valid
    destination is there.
    """
    if text[start:maximum].startswith("<"):
        return _parse_bracketed_destination(text, start, maximum)
    return _parse_bare_destination(text, start, maximum)


def parse_link_title(
    text: str, start: int, maximum: int
) -> ParseLinkFragmentResult | None:
    """Parse a ``"title"``, ``'title'`` or ``(title)`` found at ``start``.

    Only ``text[start:maximum]`` is examined. Returns ``None`` if no valid
    title is there.
    """
    chars = iter(text[start:maximum])
    marker = _TITLE_CLOSERS.get(next(chars, ""))
    if marker is None:
        return None

    pos = start + 1
    lines = 0
    for ch in chars:
        if ch == marker:
            return ParseLinkFragmentResult(
                pos=pos + 1, lines=lines, text=unescape_all(text[start + 1 : pos])
            )
        if ch == "(" and marker == ")":
            return None
        if ch == "\n":
            lines += 1
            pos += 1
        elif ch == "\\":
            if next(chars, None) is None:
                return None
            pos += 2
        else:
            pos += 1
    return None