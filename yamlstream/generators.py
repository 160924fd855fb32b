"""Random text generators used to build large YAML documents."""

from __future__ import annotations

import random
import string

_HEX_DIGITS = "0123456789abcdef"
_EMAIL_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-_.0123456789"
_ALNUM = string.ascii_letters + string.digits
_UPPER = string.ascii_uppercase
_LOWER = string.ascii_lowercase
_WORD_STRIP = frozenset("-'\",*:")

_LOREM_WORDS = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua enim ad minim veniam quis nostrud "
    "exercitation ullamco laboris nisi aliquip ex ea commodo consequat duis aute irure "
    "in reprehenderit voluptate velit esse cillum fugiat nulla pariatur excepteur sint "
    "occaecat cupidatat non proident sunt culpa qui officia deserunt mollit anim id est "
    "laborum perspiciatis unde omnis iste natus error voluptatem accusantium doloremque "
    "laudantium totam rem aperiam eaque ipsa quae ab illo inventore veritatis quasi "
    "architecto beatae vitae dicta explicabo nemo ipsam quia voluptas aspernatur aut "
    "odit fugit consequuntur magni dolores eos ratione sequi nesciunt neque porro quisquam"
).split()


def _clone(rng: random.Random) -> random.Random:
    copy = random.Random()
    copy.setstate(rng.getstate())
    return copy


def string_from_set(rng: random.Random, len_lo: int, len_hi: int, charset: str) -> str:
    """Return a string of length in ``[len_lo, len_hi)`` drawn from ``charset``."""
    length = rng.randrange(len_lo, len_hi)
    return "".join(charset[rng.randrange(len(charset))] for _ in range(length))


def hex_string(rng: random.Random, length: int) -> str:
    """Return a string of ``length`` lowercase hexadecimal digits."""
    return string_from_set(rng, length, length + 1, _HEX_DIGITS)


def email(rng: random.Random, len_lo: int, len_hi: int) -> str:
    """Return an e-mail address at example.com with a local part of random length."""
    return f"{string_from_set(rng, len_lo, len_hi, _EMAIL_CHARSET)}@example.com"


def url(
    rng: random.Random,
    scheme: str,
    n_paths_lo: int,
    n_paths_hi: int,
    path_len_lo: int,
    path_len_hi: int,
    extension: str | None,
) -> str:
    """Return a URL at example.com with random alphanumeric path components."""
    parts = [f"{scheme}://example.com"]
    for _ in range(rng.randrange(n_paths_lo, n_paths_hi)):
        parts.append("/")
        parts.append(alnum_string(rng, path_len_lo, path_len_hi))
    if extension is not None:
        parts.append(".")
        parts.append(extension)
    return "".join(parts)


def integer(rng: random.Random, lo: int, hi: int) -> int:
    """Return a random integer in ``[lo, hi)``."""
    return rng.randrange(lo, hi)


def alnum_string(rng: random.Random, lo_len: int, hi_len: int) -> str:
    """Return an alphanumeric string with a length in ``[lo_len, hi_len)``."""
    return string_from_set(rng, lo_len, hi_len, _ALNUM)


def lipsum_words(rng: random.Random, count: int) -> str:
    """Return a lorem ipsum sentence of ``count`` words.

    The sentence starts with a capital letter and ends with a period.
    """
    if count <= 0:
        return ""
    chosen = [rng.choice(_LOREM_WORDS) for _ in range(count)]
    for index in range(count - 1):
        if rng.random() < 0.1:
            chosen[index] += ","
    chosen[0] = chosen[0].capitalize()
    chosen[-1] += "."
    return " ".join(chosen)


def paragraph(
    rng: random.Random,
    lines_lo: int,
    lines_hi: int,
    wps_lo: int,
    wps_hi: int,
    line_maxcol: int,
) -> list[str]:
    """Return the lines of a lorem ipsum paragraph wrapped at ``line_maxcol``.

    Raises ValueError if a line cannot be wrapped because it has no whitespace.
    """
    lines: list[str] = []
    nlines = rng.randrange(lines_lo, lines_hi)

    while len(lines) < nlines:
        words_in_sentence = rng.randrange(wps_lo, wps_hi)
        sentence = lipsum_words(_clone(rng), words_in_sentence)

        if lines:
            sentence = f"{lines.pop()} {sentence}"

        while len(sentence) > line_maxcol:
            head = sentence[:line_maxcol]
            space = max(head.rfind(" "), head.rfind("\t"), head.rfind("\n"))
            if space < 0:
                raise ValueError(f"cannot wrap line without whitespace: {head!r}")
            cut = space + 1
            lines.append(sentence[:cut])
            sentence = sentence[cut + 1 :]
        if sentence:
            lines.append(sentence)

    return lines


def name(rng: random.Random, len_lo: int, len_hi: int) -> str:
    """Return a capitalised name: one uppercase letter then lowercase ones."""
    length = rng.randrange(len_lo, len_hi)
    first = _UPPER[rng.randrange(len(_UPPER))]
    return first + string_from_set(rng, length, length + 1, _LOWER)


def full_name(rng: random.Random, len_lo: int, len_hi: int) -> str:
    """Return two names separated by a space."""
    return f"{name(rng, len_lo, len_hi)} {name(rng, len_lo, len_hi)}"


def words(rng: random.Random, words_lo: int, words_hi: int) -> str:
    """Return lorem ipsum words with quotes, dashes, commas, stars and colons removed."""
    nwords = rng.randrange(words_lo, words_hi)
    sentence = lipsum_words(_clone(rng), nwords)
    return "".join(c for c in sentence if c not in _WORD_STRIP)


def text(
    rng: random.Random,
    paragraphs_lo: int,
    paragraphs_hi: int,
    lines_lo: int,
    lines_hi: int,
    wps_lo: int,
    wps_hi: int,
    line_maxcol: int,
) -> list[str]:
    """Return the lines of several paragraphs separated by empty lines."""
    lines: list[str] = []
    for index in range(rng.randrange(paragraphs_lo, paragraphs_hi)):
        if index:
            lines.append("")
        lines.extend(paragraph(rng, lines_lo, lines_hi, wps_lo, wps_hi, line_maxcol))
    return lines