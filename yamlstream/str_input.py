"""A character source backed by an in-memory string."""

from __future__ import annotations

import re

from yamlstream.char_traits import (
    is_alpha,
    is_blank,
    is_blank_or_breakz,
    is_break,
    is_breakz,
    is_digit,
    is_flow,
    is_z,
)
from yamlstream.input import CommentSeparationError, Input, SkipTabs, WhitespaceSkip

BUFFER_LEN = 128
"""The buffer size reported to the scanner.

No buffer is allocated: every character of the string is available at once.
The value only bounds how far the scanner asks to look ahead, and fits a
reasonable maximum line length.
"""

_BLANKS = re.compile(r"[ \t]*")
_SPACES = re.compile(r" *")
_NON_BREAKZ = re.compile(r"[^\r\n\0]*")
_ALPHA = re.compile(r"[0-9A-Za-z_\-]*")


class StrInput(Input):
    """A character source over a string; ``\\0`` is returned past its end."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._lookahead_len = 0

    def _at(self, index: int) -> str:
        return self._text[index] if index < len(self._text) else "\0"

    def _remaining(self) -> int:
        return len(self._text) - self._pos

    def lookahead(self, count: int) -> None:
        """Record that ``count`` characters were asked for; all are already available."""
        self._lookahead_len = max(self._lookahead_len, count)

    def buflen(self) -> int:
        """Return the largest lookahead asked for so far."""
        return self._lookahead_len

    def bufmaxlen(self) -> int:
        """Return the buffer size reported to the scanner."""
        return BUFFER_LEN

    def raw_read_ch(self) -> str:
        """Consume and return the next character, or ``\\0`` at the end."""
        c = self._at(self._pos)
        if self._pos < len(self._text):
            self._pos += 1
        return c

    def raw_read_non_breakz_ch(self) -> str | None:
        """Consume and return the next character unless it is a breakz or the end."""
        if self._pos >= len(self._text):
            return None
        c = self._text[self._pos]
        if is_breakz(c):
            return None
        self._pos += 1
        return c

    def skip(self) -> None:
        """Consume the next character, if any."""
        self._pos = min(self._pos + 1, len(self._text))

    def skip_n(self, count: int) -> None:
        """Consume up to ``count`` characters."""
        self._pos = min(self._pos + count, len(self._text))

    def peek(self) -> str:
        """Return the next character, or ``\\0`` at the end."""
        return self._at(self._pos)

    def peek_nth(self, n: int) -> str:
        """Return the ``n``-th next character, or ``\\0`` past the end."""
        return self._at(self._pos + n)

    def next_2_are(self, c1: str, c2: str) -> bool:
        """Return whether the next two characters are ``c1`` and ``c2``."""
        return self._text[self._pos : self._pos + 2] == c1 + c2

    def next_3_are(self, c1: str, c2: str, c3: str) -> bool:
        """Return whether the next three characters are ``c1``, ``c2`` and ``c3``."""
        return self._text[self._pos : self._pos + 3] == c1 + c2 + c3

    def _next_is_marker(self, markers: tuple[str, ...]) -> bool:
        head = self._text[self._pos : self._pos + 4]
        if len(head) < 3 or head[:3] not in markers:
            return False
        return len(head) == 3 or is_blank_or_breakz(head[3])

    def next_is_document_indicator(self) -> bool:
        """Return whether the next characters are ``---`` or ``...`` followed by a blank or the end."""
        return self._next_is_marker(("---", "..."))

    def next_is_document_start(self) -> bool:
        """Return whether the next characters are ``---`` followed by a blank or the end."""
        return self._next_is_marker(("---",))

    def next_is_document_end(self) -> bool:
        """Return whether the next characters are ``...`` followed by a blank or the end."""
        return self._next_is_marker(("...",))

    def skip_ws_to_eol(self, skip_tabs: SkipTabs) -> tuple[int, WhitespaceSkip]:
        """Skip whitespace and a comment up to, not including, the end of the line.

        Returns the number of characters consumed and what was found.
        Raises CommentSeparationError if a comment directly follows a token.
        """
        pattern = _BLANKS if skip_tabs is SkipTabs.YES else _SPACES
        match = pattern.match(self._text, self._pos)
        skipped = match.group()
        has_yaml_ws = " " in skipped
        encountered_tab = "\t" in skipped
        pos = match.end()
        consumed = len(skipped)

        if pos < len(self._text) and self._text[pos] == "#":
            if not encountered_tab and not has_yaml_ws:
                raise CommentSeparationError(consumed)
            comment = _NON_BREAKZ.match(self._text, pos)
            consumed += comment.end() - pos
            pos = comment.end()

        self._pos = pos
        return consumed, WhitespaceSkip(encountered_tab, has_yaml_ws)

    def next_can_be_plain_scalar(self, in_flow: bool) -> bool:
        """Return whether the next characters may continue a plain scalar."""
        c = self.peek()
        if c == ":":
            if self._remaining() <= 1:
                return False
            nc = self.peek_nth(1)
            if is_blank_or_breakz(nc) or (in_flow and is_flow(nc)):
                return False
        return not (in_flow and is_flow(c))

    def next_is_blank_or_break(self) -> bool:
        """Return whether the next character is a blank or a break."""
        c = self.peek()
        return self._remaining() > 0 and (is_blank(c) or is_break(c))

    def next_is_blank_or_breakz(self) -> bool:
        """Return whether the next character is a blank, a breakz, or the end."""
        c = self.peek()
        return self._remaining() == 0 or is_blank(c) or is_breakz(c)

    def next_is_blank(self) -> bool:
        """Return whether the next character is a blank."""
        return self._remaining() > 0 and is_blank(self.peek())

    def next_is_break(self) -> bool:
        """Return whether the next character is a break."""
        return self._remaining() > 0 and is_break(self.peek())

    def next_is_breakz(self) -> bool:
        """Return whether the next character is a breakz or the end."""
        return self._remaining() == 0 or is_breakz(self.peek())

    def next_is_z(self) -> bool:
        """Return whether the next character is nil or the end."""
        return self._remaining() == 0 or is_z(self.peek())

    def next_is_flow(self) -> bool:
        """Return whether the next character is a flow indicator."""
        return self._remaining() > 0 and is_flow(self.peek())

    def next_is_digit(self) -> bool:
        """Return whether the next character is a digit."""
        return self._remaining() > 0 and is_digit(self.peek())

    def next_is_alpha(self) -> bool:
        """Return whether the next character is alphanumeric, ``_`` or ``-``."""
        return self._remaining() > 0 and is_alpha(self.peek())

    def skip_while_non_breakz(self) -> int:
        """Consume characters up to a breakz; return how many were consumed."""
        match = _NON_BREAKZ.match(self._text, self._pos)
        count = match.end() - self._pos
        self._pos = match.end()
        return count

    def skip_while_blank(self) -> int:
        """Consume blanks; return how many were consumed."""
        match = _BLANKS.match(self._text, self._pos)
        count = match.end() - self._pos
        self._pos = match.end()
        return count

    def fetch_while_is_alpha(self) -> str:
        """Consume and return the run of alphanumeric, ``_`` or ``-`` characters."""
        match = _ALPHA.match(self._text, self._pos)
        self._pos = match.end()
        return match.group()