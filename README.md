# solong

Building blocks for a small tile-based puzzle game: a reader for XPM
images, the table of named X11 colours that XPM files refer to, and a
set of string, character, line-reading and output helpers that follow
the rules of the classic C library functions. It has no dependencies
outside the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## What is here

### `solong.xpm`: XPM images

- `load_xpm(path)` reads an XPM file and returns an `XpmImage`. It raises
  `XpmError` (a `ValueError`) when the file cannot be read or parsed.
- `parse_xpm_text(text)` parses the text of an XPM file. Comments
  (`/* */` and `//`, outside double quotes) are ignored, and the quoted
  strings are read in order.
- `parse_xpm_lines(lines)` builds an image from those quoted strings
  directly: the header (`width height colours chars-per-pixel`), the
  colour lines, then the pixel rows.
- `XpmImage` has `width`, `height` and `pixels` (rows of `0xAARRGGBB`
  values, top to bottom), `pixel(x, y)`, and `to_rgba_bytes()`, which
  gives RGBA bytes with ordinary opacity. In `pixels`, an alpha byte of
  `0xFF` marks a transparent pixel (the colour `None`); that value is
  `solong.xpm.TRANSPARENT`.
- `text_to_rgb(name, end=None)` turns a colour specification into a
  number: `#RRGGBB` is read as hexadecimal, other names are looked up in
  the colour table ignoring case, `None` gives `-1` and unknown names
  give `0`.
- `split_words(text)` splits on spaces and tabs; `strip_comments(text)`
  blanks comments while keeping the length of the text.

```python
from solong.xpm import TRANSPARENT, parse_xpm_text

text = '''/* XPM */
static char *img[] = {
"2 1 2 1",
"a c #FF0000",
"b c None",
"ab"
};'''

image = parse_xpm_text(text)
assert (image.width, image.height) == (2, 1)
assert image.pixel(0, 0) == 0xFF0000
assert image.pixel(1, 0) == TRANSPARENT
assert image.to_rgba_bytes() == bytes([255, 0, 0, 255, 0, 0, 0, 0])
```

### `solong.colors`: named colours

`lookup_color(name)` returns the `0xRRGGBB` value of an X11 colour name,
ignoring case, `-1` for `"none"`, and raises `KeyError` for names not in
the table.

### `solong.strutil`: strings

`atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`,
`strchr`, `strrchr`, `strlcpy`, `strlcat` and `strmapi`. Searches return
the rest of the string from the match, or `None`; `strlcpy` and `strlcat`
return the resulting text together with the length the C functions
report; `atoi` wraps to 32 bits.

### `solong.chars`: characters and bytes

`isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`, `tolower`,
`toupper`, `memcmp` and `memchr`. Characters may be given as
one-character strings or as integer codes. Note that `isalpha` does not
count `'A'` as a letter; its range starts at `'B'`.

### `solong.output`: formatted output

`sprintf(fmt, *args)` understands `%c %s %p %d %i %u %x %X %%`;
`printf` writes the result to standard output and returns its length.
`putstr`, `putendl` and `putnbr` write to a given stream, or to standard
output by default.

```python
from solong.output import sprintf

assert sprintf("Num of moves: %d", 3) == "Num of moves: 3"
assert sprintf("%x %s", 255, None) == "ff (null)"
```

### `solong.lines`: reading lines

`iter_lines(stream, buffer_size=42)` yields lines from a text or binary
stream, reading `buffer_size` units at a time. Each line keeps its
newline; the last one may lack it.

```python
import io
from solong.lines import iter_lines

assert list(iter_lines(io.StringIO("ab\ncd"))) == ["ab\n", "cd"]
```

## What this package does not do

There is no playable game here: no command to start, no window, no
drawing of tiles, no keyboard handling and no move counter. Nor does the
package read or check `.ber` level maps (the walls, the single start and
exit, the collectables, or whether they can be reached). What it offers
is the image, colour and text handling listed above.