"""Formatted and plain text output helpers."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_UINT_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "c":
        arg = _next_arg(values)
        return chr(arg & 0xFF) if isinstance(arg, int) else str(arg)[:1]
    if spec == "s":
        arg = _next_arg(values)
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        arg = _next_arg(values)
        return "0x" + format(0 if arg is None else arg, "x")
    if spec in ("d", "i"):
        return str(_to_int32(_next_arg(values)))
    if spec == "u":
        return str(_next_arg(values) & _UINT_MASK)
    if spec in ("x", "X"):
        return format(_next_arg(values) & _UINT_MASK, spec)
    if spec == "%":
        return "%"
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Format text with the conversions %c %s %p %d %i %u %x %X and %%.

    %s of None gives "(null)"; %d and %i wrap to 32-bit signed, %u, %x and
    %X to 32-bit unsigned. Unknown conversions produce nothing and consume
    no argument. Raises TypeError when arguments run out.
    """
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for ch in chars:
        if ch == "%":
            out.append(_convert(next(chars, ""), values))
        else:
            out.append(ch)
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write formatted text to standard output; return the number of characters written."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def putstr(text: str | None, stream: TextIO | None = None) -> None:
    """Write text to stream (standard output by default); None writes nothing."""
    if text is None:
        return
    (stream or sys.stdout).write(text)


def putendl(text: str | None, stream: TextIO | None = None) -> None:
    """Write text followed by a newline."""
    target = stream or sys.stdout
    putstr(text, target)
    target.write("\n")


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of n."""
    (stream or sys.stdout).write(str(n))