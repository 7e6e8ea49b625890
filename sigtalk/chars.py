"""ASCII character classification and case conversion.

Every function accepts either an integer code point or a one-character
string. Only the ASCII ranges count: anything outside them is never a
letter or digit and is returned unchanged by the case converters.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_LOWER = range(ord("a"), ord("z") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_PRINTABLE = range(32, 127)
_ASCII = range(0, 128)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code for *c*, validating its form."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return code in _LOWER or code in _UPPER


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _code(c) in _DIGITS


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    code = _code(c)
    return code in _LOWER or code in _UPPER or code in _DIGITS


def is_ascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return _code(c) in _ASCII


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return _code(c) in _PRINTABLE


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; return anything else unchanged."""
    code = _code(c)
    if code in _LOWER:
        return _same_kind(c, code - _CASE_OFFSET)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; return anything else unchanged."""
    code = _code(c)
    if code in _UPPER:
        return _same_kind(c, code + _CASE_OFFSET)
    return c