"""String helpers used when splitting commands and searching the environment."""

from __future__ import annotations

__all__ = ["split", "strnstr", "strtrim", "substr", "strlcpy", "strlcat"]


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty pieces.

    Runs of the separator, as well as leading and trailing separators,
    never produce empty words.
    """
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(sep) if word]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of *needle* within the first *length* characters.

    An empty needle is found at index 0. ``None`` means no match. When the
    needle is longer than *length*, only a match at the very start of the
    haystack is accepted.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    if length == 0:
        return None
    if len(needle) > length:
        return 0 if haystack.startswith(needle) else None
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def strtrim(text: str, chars: str) -> str:
    """Remove every character of *chars* from both ends of *text*."""
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start past the end of the text yields an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* slots, one kept for the terminator.

    Returns the copied text and the full length of *src*, so truncation
    shows as a total larger than the copied text.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dest* in a buffer of *size* slots.

    Returns the resulting text and the length the full concatenation
    would need. A buffer smaller than *dest* leaves it unchanged and
    reports ``len(src) + size``.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dest, len(src)
    if size < len(dest):
        return dest, len(src) + size
    room = max(size - len(dest) - 1, 0)
    return dest + src[:room], len(dest) + len(src)