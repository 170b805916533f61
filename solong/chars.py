"""Character classification, case mapping and byte-buffer helpers."""

from __future__ import annotations

_UINT_MASK = 0xFFFFFFFF


def _code(c: str | int) -> int:
    """Return the code of a character given as a one-character str or an int."""
    if isinstance(c, int):
        return c
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c)


def _byte(c: str | bytes | int) -> int:
    """Return a byte value from an int, a one-character str or a one-byte bytes."""
    if isinstance(c, int):
        return c % 256
    if len(c) != 1:
        raise ValueError(f"expected a single byte, got {c!r}")
    return c[0] if isinstance(c, (bytes, bytearray)) else ord(c) % 256


def isalnum(c: str | int) -> bool:
    """Return True for ASCII letters and decimal digits."""
    code = _code(c)
    return (
        ord("0") <= code <= ord("9")
        or ord("A") <= code <= ord("Z")
        or ord("a") <= code <= ord("z")
    )


def isalpha(c: str | int) -> bool:
    """Return True for ASCII letters from 'B' to 'Z' and from 'a' to 'z'.

    The range starts at 'B', so 'A' is not reported as a letter. Negative
    codes are taken as unsigned and are never letters.
    """
    code = _code(c) & _UINT_MASK
    if code < ord("B") or code > ord("z"):
        return False
    return not ord("Z") < code < ord("a")


def isascii(c: str | int) -> bool:
    """Return True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isdigit(c: str | int) -> bool:
    """Return True for the decimal digits '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def isprint(c: str | int) -> bool:
    """Return True for printable ASCII, codes 32 to 126."""
    return 32 <= _code(c) <= 126


def tolower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; other values are unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return code if isinstance(c, int) else chr(code)


def toupper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; other values are unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return code if isinstance(c, int) else chr(code)


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes of a and b.

    Returns the difference of the first pair of bytes that differ, or 0.
    Raises ValueError when either buffer is shorter than n.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if len(a) < n or len(b) < n:
        raise ValueError("buffers are shorter than the compared length")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memchr(data: bytes, c: str | bytes | int, n: int) -> bytes | None:
    """Find byte c within the first n bytes of data.

    Returns data from the match onwards, or None when there is no match.
    Integer values of 256 and above wrap around. Raises ValueError when
    data is shorter than n.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if len(data) < n:
        raise ValueError("buffer is shorter than the searched length")
    index = bytes(data[:n]).find(bytes([_byte(c)]))
    return None if index < 0 else bytes(data[index:])