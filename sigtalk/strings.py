"""String helpers: numeric conversion, searching, slicing and joining.

Searches return an index into the text, or None when nothing matches,
where the result of a C-style search would be a pointer or NULL. A
single character may be given as a one-character string or as an
integer code point.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Optional, TypeVar, Union

from sigtalk.chars import is_digit

CharLike = Union[int, str]
T = TypeVar("T")

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Reduce *value* to a signed integer of the C int width."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is read, then ASCII
    digits up to the first non-digit. Text without digits yields 0. The
    result wraps around like a 32-bit signed int.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not is_digit(ch):
            break
        result = _wrap_int(result * 10 + int(ch))
    return _wrap_int(sign * result)


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    return str(int(number))


def split(text: str, sep: CharLike) -> list[str]:
    """Split *text* on the separator character, dropping empty pieces."""
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of *c*, or None.

    Searching for the NUL character finds the end of the text.
    """
    target = _char(c)
    if target == "\0" and target not in text:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of *c*, or None.

    Searching for the NUL character finds the end of the text.
    """
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of *needle* lying wholly within the first *length* characters.

    An empty needle is found at index 0.
    """
    _check_non_negative(length=length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters.

    Returns the code-point difference at the first mismatch, the end of
    a shorter string counting as code 0, or 0 when they agree.
    """
    _check_non_negative(n=n)
    for a, b in zip_longest(first[:n], second[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def substr(text: str, start: int, length: int) -> str:
    """Up to *length* characters of *text* from *start*; empty past the end."""
    _check_non_negative(start=start, length=length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strtrim(text: str, charset: Optional[str]) -> str:
    """Remove characters found in *charset* from both ends of *text*.

    With no charset the text is returned unchanged.
    """
    if charset is None:
        return text
    return text.strip(charset)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, character) for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: MutableSequence[T], func: Callable[[int, T], Optional[T]]) -> None:
    """Apply func(index, item) to every item of a mutable sequence in place.

    A non-None result replaces the item; None leaves it as it was.
    """
    for index, item in enumerate(text):
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement


def strlcpy(text: str, size: int) -> tuple[str, int]:
    """Copy *text* into a buffer of *size* characters, terminator included.

    Returns the copied string, truncated to size - 1 characters, and the
    full length of *text*.
    """
    _check_non_negative(size=size)
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* characters.

    Returns the resulting string and the length the full result would
    have had; when *size* does not exceed len(dest) that length is
    len(src) + size and *dest* comes back unchanged.
    """
    _check_non_negative(size=size)
    if size <= len(dest):
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)