"""The character source interface used by the YAML scanner."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass

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


class SkipTabs(enum.Enum):
    """Whether tabs count as whitespace when skipping to the end of a line."""

    YES = "yes"
    NO = "no"


@dataclass(frozen=True)
class WhitespaceSkip:
    """What was found while skipping whitespace to the end of a line."""

    found_tabs: bool
    has_valid_yaml_ws: bool


class CommentSeparationError(ValueError):
    """A comment was not separated from the preceding token by whitespace."""

    def __init__(self, consumed: int) -> None:
        super().__init__("comments must be separated from other tokens by whitespace")
        self.consumed = consumed


class Input(ABC):
    """A source of characters with lookahead.

    Past the end of the input, ``\\0`` is returned for every character.
    """

    @abstractmethod
    def lookahead(self, count: int) -> None:
        """Make sure the next ``count`` characters are available, without consuming them."""

    @abstractmethod
    def buflen(self) -> int:
        """Return the number of buffered characters."""

    @abstractmethod
    def bufmaxlen(self) -> int:
        """Return the capacity of the buffer."""

    def buf_is_empty(self) -> bool:
        """Return whether the buffer (not the stream) is empty."""
        return self.buflen() == 0

    @abstractmethod
    def raw_read_ch(self) -> str:
        """Read and consume one character from the stream, bypassing the buffer."""

    @abstractmethod
    def raw_read_non_breakz_ch(self) -> str | None:
        """Read a character that is not a breakz, bypassing the buffer.

        Returns None, without consuming it from the stream, if the next character is a breakz.
        """

    @abstractmethod
    def skip(self) -> None:
        """Consume the next character."""

    @abstractmethod
    def skip_n(self, count: int) -> None:
        """Consume the next ``count`` characters."""

    @abstractmethod
    def peek(self) -> str:
        """Return the next character without consuming it."""

    @abstractmethod
    def peek_nth(self, n: int) -> str:
        """Return the ``n``-th next character without consuming it."""

    def look_ch(self) -> str:
        """Look ahead one character and return it."""
        self.lookahead(1)
        return self.peek()

    def next_char_is(self, c: str) -> bool:
        """Return whether the next character is ``c``."""
        return self.peek() == c

    def nth_char_is(self, n: int, c: str) -> bool:
        """Return whether the ``n``-th next character is ``c``."""
        return self.peek_nth(n) == c

    def _require_buffered(self, count: int) -> None:
        if self.buflen() < count:
            raise ValueError(f"at least {count} characters must be looked ahead")

    def next_2_are(self, c1: str, c2: str) -> bool:
        """Return whether the next two characters are ``c1`` and ``c2``."""
        self._require_buffered(2)
        return self.peek() == c1 and self.peek_nth(1) == c2

    def next_3_are(self, c1: str, c2: str, c3: str) -> bool:
        """Return whether the next three characters are ``c1``, ``c2`` and ``c3``."""
        self._require_buffered(3)
        return self.peek() == c1 and self.peek_nth(1) == c2 and self.peek_nth(2) == c3

    def next_is_document_indicator(self) -> bool:
        """Return whether the next characters are ``---`` or ``...`` followed by a blank."""
        self._require_buffered(4)
        return is_blank_or_breakz(self.peek_nth(3)) and (
            self.next_3_are(".", ".", ".") or self.next_3_are("-", "-", "-")
        )

    def next_is_document_start(self) -> bool:
        """Return whether the next characters are ``---`` followed by a blank."""
        self._require_buffered(4)
        return self.next_3_are("-", "-", "-") and is_blank_or_breakz(self.peek_nth(3))

    def next_is_document_end(self) -> bool:
        """Return whether the next characters are ``...`` followed by a blank."""
        self._require_buffered(4)
        return self.next_3_are(".", ".", ".") and is_blank_or_breakz(self.peek_nth(3))

    def skip_ws_to_eol(self, skip_tabs: SkipTabs) -> tuple[int, WhitespaceSkip]:
        """Skip whitespace and a comment up to, not including, the end of the line.

        Returns the number of characters consumed and what was found.
        Raises CommentSeparationError if a comment directly follows a token; its
        ``consumed`` attribute holds the characters consumed before the ``#``.
        """
        encountered_tab = False
        has_yaml_ws = False
        consumed = 0
        while True:
            c = self.look_ch()
            if c == " ":
                has_yaml_ws = True
                self.skip()
            elif c == "\t" and skip_tabs is not SkipTabs.NO:
                encountered_tab = True
                self.skip()
            elif c == "#":
                if not encountered_tab and not has_yaml_ws:
                    raise CommentSeparationError(consumed)
                self.skip()
                while not is_breakz(self.look_ch()):
                    self.skip()
                    consumed += 1
            else:
                break
            consumed += 1
        return consumed, WhitespaceSkip(encountered_tab, has_yaml_ws)

    def next_can_be_plain_scalar(self, in_flow: bool) -> bool:
        """Return whether the next characters may continue a plain scalar."""
        c = self.peek()
        nc = self.peek_nth(1)
        if c == ":" and (is_blank_or_breakz(nc) or (in_flow and is_flow(nc))):
            return False
        return not (in_flow and is_flow(c))

    def next_is_blank_or_break(self) -> bool:
        """Return whether the next character is a blank or a break."""
        c = self.peek()
        return is_blank(c) or is_break(c)

    def next_is_blank_or_breakz(self) -> bool:
        """Return whether the next character is a blank or a breakz."""
        c = self.peek()
        return is_blank(c) or is_breakz(c)

    def next_is_blank(self) -> bool:
        """Return whether the next character is a blank."""
        return is_blank(self.peek())

    def next_is_break(self) -> bool:
        """Return whether the next character is a break."""
        return is_break(self.peek())

    def next_is_breakz(self) -> bool:
        """Return whether the next character is a breakz."""
        return is_breakz(self.peek())

    def next_is_z(self) -> bool:
        """Return whether the next character is nil."""
        return is_z(self.peek())

    def next_is_flow(self) -> bool:
        """Return whether the next character is a flow indicator."""
        return is_flow(self.peek())

    def next_is_digit(self) -> bool:
        """Return whether the next character is a digit."""
        return is_digit(self.peek())

    def next_is_alpha(self) -> bool:
        """Return whether the next character is alphanumeric, ``_`` or ``-``."""
        return is_alpha(self.peek())

    def skip_while_non_breakz(self) -> int:
        """Consume characters up to a breakz; return how many were consumed."""
        count = 0
        while not is_breakz(self.look_ch()):
            count += 1
            self.skip()
        return count

    def skip_while_blank(self) -> int:
        """Consume blanks; return how many were consumed."""
        count = 0
        while is_blank(self.look_ch()):
            count += 1
            self.skip()
        return count

    def fetch_while_is_alpha(self) -> str:
        """Consume and return the run of alphanumeric, ``_`` or ``-`` characters."""
        out = []
        while is_alpha(self.look_ch()):
            out.append(self.peek())
            self.skip()
        return "".join(out)