"""Integer parsing and formatting helpers."""

from __future__ import annotations

import string
from itertools import takewhile

__all__ = ["atoi", "itoa", "ull_base", "hexlen", "number_in_base"]

_WHITESPACE = " \n\t\v\r\f"
_UPPER_DIGITS = string.digits + string.ascii_uppercase
_LOWER_DIGITS = string.digits + string.ascii_lowercase


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")


def _digits_of(value: int, base: int, alphabet: str) -> str:
    """Render a non-negative *value* in *base* using *alphabet*."""
    if value == 0:
        return "0"
    out: list[str] = []
    while value:
        value, remainder = divmod(value, base)
        out.append(alphabet[remainder])
    return "".join(reversed(out))


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring what follows it.

    Leading whitespace is skipped and a single ``+`` or ``-`` is accepted.
    Text with no digits in that position yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in string.digits, rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    if n < 0:
        return "-" + _digits_of(-n, 10, _LOWER_DIGITS)
    return _digits_of(n, 10, _LOWER_DIGITS)


def ull_base(value: int, base: int) -> str:
    """Render an unsigned *value* in *base* with upper-case digits."""
    _check_base(base)
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    return _digits_of(value, base, _UPPER_DIGITS)


def hexlen(n: int) -> int:
    """Count how many times *n* can be divided by 16 while it exceeds 1."""
    count = 0
    while n > 1:
        n //= 16
        count += 1
    return count


def number_in_base(n: int, base: int) -> str:
    """Render a signed *n* in *base* with lower-case digits."""
    _check_base(base)
    if n < 0:
        return "-" + _digits_of(-n, base, _LOWER_DIGITS)
    return _digits_of(n, base, _LOWER_DIGITS)