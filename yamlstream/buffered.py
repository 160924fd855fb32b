"""A buffered character source over any iterable of characters."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from yamlstream.char_traits import is_breakz
from yamlstream.input import Input

BUFFER_LEN = 16
"""Capacity of the lookahead buffer.

Most lookaheads need at most 4 characters; escape sequences need up to 8, and
scanning the indentation of block scalars may ask for ``indent + 2``. The
scanner falls back to looking ahead in a loop when that exceeds the buffer.
"""


class BufferedInput(Input):
    """A character source reading from an iterable, with a bounded lookahead buffer.

    Once the iterable is exhausted, ``\\0`` is used to pad the buffer.
    """

    def __init__(self, chars: Iterable[str]) -> None:
        self._chars = iter(chars)
        self._buffer: deque[str] = deque()

    def _push(self, c: str) -> None:
        if len(self._buffer) >= BUFFER_LEN:
            raise OverflowError(f"lookahead buffer is full ({BUFFER_LEN} characters)")
        self._buffer.append(c)

    def lookahead(self, count: int) -> None:
        """Buffer characters until at least ``count`` are available.

        Raises OverflowError if that exceeds the buffer capacity.
        """
        for _ in range(count - len(self._buffer)):
            self._push(next(self._chars, "\0"))

    def buflen(self) -> int:
        """Return the number of buffered characters."""
        return len(self._buffer)

    def bufmaxlen(self) -> int:
        """Return the capacity of the buffer."""
        return BUFFER_LEN

    def raw_read_ch(self) -> str:
        """Read one character straight from the iterable, or ``\\0`` at its end."""
        return next(self._chars, "\0")

    def raw_read_non_breakz_ch(self) -> str | None:
        """Read one character straight from the iterable unless it is a breakz.

        A breakz character that was read is placed into the buffer and None is returned.
        """
        c = next(self._chars, None)
        if c is None:
            return None
        if is_breakz(c):
            self._push(c)
            return None
        return c

    def skip(self) -> None:
        """Drop the next buffered character, if any."""
        if self._buffer:
            self._buffer.popleft()

    def skip_n(self, count: int) -> None:
        """Drop the next ``count`` buffered characters.

        Raises ValueError if fewer than ``count`` characters are buffered.
        """
        if count > len(self._buffer):
            raise ValueError(
                f"cannot skip {count} characters, only {len(self._buffer)} are buffered"
            )
        for _ in range(count):
            self._buffer.popleft()

    def peek(self) -> str:
        """Return the next buffered character.

        Raises IndexError if the buffer is empty.
        """
        return self._buffer[0]

    def peek_nth(self, n: int) -> str:
        """Return the ``n``-th buffered character.

        Raises IndexError if it has not been buffered.
        """
        return self._buffer[n]