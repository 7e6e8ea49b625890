"""A small printf: %c %s %p %d %i %u %x %X and %% conversions.

Integer conversions take C ``int`` semantics: values wrap to 32 bits,
and the unsigned and hexadecimal forms show the two's-complement bit
pattern of negative numbers. Any other character after ``%`` prints
nothing and consumes no argument, as does a ``%`` at the very end.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, Optional, TextIO, Union

DECIMAL_DIGITS = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _to_signed(number: int) -> int:
    number &= _UINT_MASK
    return number - (1 << _INT_BITS) if number >> (_INT_BITS - 1) else number


def format_base(number: int, digits: str) -> str:
    """Write *number* in the base given by the symbols in *digits*.

    A negative number gets a leading minus sign.
    """
    number = _require_int(number)
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digit symbols")
    sign = "-" if number < 0 else ""
    remaining = abs(number)
    symbols = []
    while True:
        remaining, index = divmod(remaining, base)
        symbols.append(digits[index])
        if not remaining:
            break
    return sign + "".join(reversed(symbols))


def format_signed(number: int) -> str:
    """Decimal form of *number* taken as a 32-bit signed int."""
    return format_base(_to_signed(_require_int(number)), DECIMAL_DIGITS)


def format_unsigned(number: int) -> str:
    """Decimal form of *number* taken as a 32-bit unsigned int."""
    return format_base(_require_int(number) & _UINT_MASK, DECIMAL_DIGITS)


def format_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal form of *number* taken as a 32-bit unsigned int."""
    digits = HEX_UPPER if upper else HEX_LOWER
    return format_base(_require_int(number) & _UINT_MASK, digits)


def format_pointer(address: Optional[int]) -> str:
    """Render an address as ``0x`` plus lower-case hex, or ``(nil)`` for null."""
    if address is None or _require_int(address) == 0:
        return "(nil)"
    return "0x" + format_base(address & _POINTER_MASK, HEX_LOWER)


def format_string(text: Optional[str]) -> str:
    """Return *text*, or ``(null)`` when it is None."""
    return "(null)" if text is None else text


def _format_char(value: Union[int, str]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {len(value)} characters")
        return value
    return chr(_require_int(value) & 0xFF)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": format_hex,
    "X": lambda value: format_hex(value, upper=True),
}


def _next_argument(arguments: Iterator[Any], spec: str) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Format *args* according to *fmt* and return the result."""
    arguments = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_argument(arguments, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format *args* with *fmt*, write it to *stream* and return its length.

    The stream defaults to standard output and is flushed after writing.
    """
    target = sys.stdout if stream is None else stream
    text = sprintf(fmt, *args)
    target.write(text)
    target.flush()
    return len(text)