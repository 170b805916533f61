"""String helpers with C-library style semantics expressed over Python str."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _as_char(c: str | int) -> str:
    """Normalise a character argument given as a one-character str or a code."""
    if isinstance(c, int):
        if c > 255:
            c -= 256
        return chr(c)
    if len(c) > 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c or "\0"


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; wraps to 32 bits.

    Parsing stops at the first non-digit; text with no digits gives 0.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] == "-":
        sign = -1
        body = body[1:]
    elif body[:1] == "+":
        body = body[1:]
    digits = []
    for ch in body:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    magnitude = int("".join(digits)) if digits else 0
    return _wrap_int(sign * _wrap_int(magnitude))


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of charset from both ends of text."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, n: int) -> str | None:
    """Find needle within the first n characters of haystack.

    Returns haystack from the match onwards, or None when there is no match.
    An empty needle matches at the start.
    """
    if not needle:
        return haystack
    index = haystack[:max(n, 0)].find(needle)
    if index < 0:
        return None
    return haystack[index:]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code-point difference at the first mismatch."""
    if n <= 0:
        return 0
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(text: str, c: str | int) -> str | None:
    """Return text from the first occurrence of c, or None.

    Searching for the terminator ("\\0" or 0) gives an empty string.
    """
    ch = _as_char(c)
    if ch == "\0":
        return ""
    index = text.find(ch)
    return None if index < 0 else text[index:]


def strrchr(text: str, c: str | int) -> str | None:
    """Return text from the last occurrence of c, or None.

    Searching for the terminator ("\\0" or 0) gives an empty string.
    """
    ch = _as_char(c)
    if ch == "\0":
        return ""
    index = text.rfind(ch)
    return None if index < 0 else text[index:]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters (terminator included).

    Returns the copied text and the full length of src.
    """
    if size <= 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters (terminator included).

    Returns the resulting text and the length the full concatenation would
    need; when size does not exceed len(dst), dst is unchanged and the
    length returned is size + len(src).
    """
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying func(index, char) to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))