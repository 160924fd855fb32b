"""Predicates that classify single characters for the YAML scanner."""

_FLOW_CHARS = frozenset(",[]{}")
_URI_EXTRA_CHARS = frozenset("#;/?:@&=+$,_.!~*'()[]%")


def is_z(c: str) -> bool:
    """Return whether the character is nil (``\\0``)."""
    return c == "\0"


def is_break(c: str) -> bool:
    """Return whether the character is a line break (``\\r`` or ``\\n``)."""
    return c in ("\n", "\r")


def is_breakz(c: str) -> bool:
    """Return whether the character is nil or a line break."""
    return is_break(c) or is_z(c)


def is_blank(c: str) -> bool:
    """Return whether the character is a space or a tab."""
    return c in (" ", "\t")


def is_blank_or_breakz(c: str) -> bool:
    """Return whether the character is nil, a line break, a space or a tab."""
    return is_blank(c) or is_breakz(c)


def is_digit(c: str) -> bool:
    """Return whether the character is an ASCII digit."""
    return "0" <= c <= "9"


def is_alpha(c: str) -> bool:
    """Return whether the character is an ASCII letter or digit, ``_`` or ``-``."""
    return (
        "0" <= c <= "9"
        or "a" <= c <= "z"
        or "A" <= c <= "Z"
        or c in ("_", "-")
    )


def is_hex(c: str) -> bool:
    """Return whether the character is a hexadecimal digit (any case)."""
    return is_digit(c) or "a" <= c <= "f" or "A" <= c <= "F"


def as_hex(c: str) -> int:
    """Return the value of a hexadecimal digit.

    Raises ValueError if the character is not a hexadecimal digit.
    """
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if "a" <= c <= "f":
        return ord(c) - ord("a") + 10
    if "A" <= c <= "F":
        return ord(c) - ord("A") + 10
    raise ValueError(f"not a hexadecimal digit: {c!r}")


def is_flow(c: str) -> bool:
    """Return whether the character is a YAML flow indicator (one of ``,[]{}``)."""
    return c in _FLOW_CHARS


def is_bom(c: str) -> bool:
    """Return whether the character is the byte order mark."""
    return c == "\ufeff"


def is_yaml_non_break(c: str) -> bool:
    """Return whether the character is a YAML non-breaking character."""
    return not is_break(c) and not is_bom(c)


def is_yaml_non_space(c: str) -> bool:
    """Return whether the character is neither a break nor YAML whitespace."""
    return is_yaml_non_break(c) and not is_blank(c)


def is_anchor_char(c: str) -> bool:
    """Return whether the character may appear in an anchor name."""
    return is_yaml_non_space(c) and not is_flow(c) and not is_z(c)


def is_word_char(c: str) -> bool:
    """Return whether the character is a word character."""
    return is_alpha(c) and c != "_"


def is_uri_char(c: str) -> bool:
    """Return whether the character may appear in a URI."""
    return is_word_char(c) or c in _URI_EXTRA_CHARS


def is_tag_char(c: str) -> bool:
    """Return whether the character may appear in a tag."""
    return is_uri_char(c) and not is_flow(c) and c != "!"