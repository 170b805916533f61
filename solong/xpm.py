"""Reading XPM images into 32-bit pixel grids."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Union

from .colors import lookup_color
from .strutil import atoi

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_WORD_RE = re.compile(r"[^ \t]+")
_QUOTED_RE = re.compile(r'"([^"]*)"')
_HEX_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")

PathArg = Union[str, "os.PathLike[str]"]


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """An image of 0xAARRGGBB pixels, rows top to bottom.

    An alpha byte of 0xFF marks a transparent pixel; 0x00 is opaque.
    """

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        return self.pixels[y][x]

    def to_rgba_bytes(self) -> bytes:
        """Return the pixels as RGBA bytes with conventional opacity."""
        out = bytearray()
        for row in self.pixels:
            for value in row:
                out += bytes((
                    (value >> 16) & 0xFF,
                    (value >> 8) & 0xFF,
                    value & 0xFF,
                    255 - ((value >> 24) & 0xFF),
                ))
        return bytes(out)


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def split_words(text: str) -> list[str]:
    """Split text on spaces and tabs, dropping empty words."""
    return _WORD_RE.findall(text)


def _blank_spans(text: str, opener: str, closer: str) -> str:
    out: list[str] = []
    in_quote = False
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == '"':
            in_quote = not in_quote
        elif not in_quote and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            stop = len(text) if end < 0 else end + len(closer)
            out.append(" " * (stop - i))
            i = stop
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def strip_comments(text: str) -> str:
    """Replace /* */ and // comments outside double quotes with spaces.

    The length of the text is kept; a // comment is blanked together with
    its closing newline, and an unterminated comment runs to the end.
    """
    return _blank_spans(_blank_spans(text, "/*", "*/"), "//", "\n")


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Return the colour value for an XPM colour specification.

    "#hex" is read as a hexadecimal number; otherwise name, joined to end
    by a space when end is given, is looked up in the colour table,
    ignoring case. "None" gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        match = _HEX_RE.match(name, 1)
        digits = match.group(2) if match else ""
        value = int(digits, 16) if digits else 0
        if match and match.group(1) == "-":
            value = -value
        return _wrap_int32(value)
    full = name if end is None else f"{name} {end}"
    try:
        return lookup_color(full[:_NAME_LIMIT])
    except KeyError:
        return 0


def _to_pixel(colour: int) -> int:
    return TRANSPARENT if colour == -1 else colour & 0xFFFFFFFF


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Build an image from the quoted strings of an XPM file, in order.

    With one or two characters per pixel a later colour definition replaces
    an earlier one for the same key; with more, the first one is kept.
    Raises XpmError for a bad header, a colour line without a "c" value, or
    missing or short pixel rows.
    """
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and characters per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"no colour value in {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"no colour value in {line!r}")
        rest = words[index + 2] if index + 2 < len(words) else None
        colour = text_to_rgb(words[index + 1], rest)
        key = line[:cpp]
        if cpp <= 2 or key not in palette:
            palette[key] = colour

    rows = []
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {line!r} is too short")
        rows.append(tuple(
            _to_pixel(palette.get(line[start:start + cpp], 0))
            for start in range(0, width * cpp, cpp)
        ))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Parse the text of an XPM file."""
    return parse_xpm_lines(_QUOTED_RE.findall(strip_comments(text)))


def load_xpm(path: PathArg) -> XpmImage:
    """Read and parse the XPM file at path; raises XpmError when it cannot be read."""
    try:
        with open(os.fspath(path), encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)!r}: {exc}") from exc
    return parse_xpm_text(text)