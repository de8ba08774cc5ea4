# pixelseek

Pure-Python in-memory bitmaps with tools to find colours and smaller images
inside larger ones. It reads and writes uncompressed 24- and 32-bit BMP files.
It also has a lenient base64 codec, a small seedable pseudo-random generator
and a blocking alert dialog. It has no dependencies outside the standard
library.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `pixelseek.geometry`

Frozen dataclasses `Point`, `SignedPoint`, `Size` and `Rect`. `Point` and
`Size` reject negative values. `SignedPoint` must fit in a signed 32-bit
range. `Rect.make(x, y, width, height)` builds a rectangle, and
`rect.contains_rect(other)` tells whether `other` lies wholly inside `rect`.

### `pixelseek.rgb`

`RGBColor(red, green, blue)` takes channels from 0 to 255 and has `to_hex()`,
`RGBColor.from_hex(0xRRGGBB)` and `similar_to(other, tolerance)`. The
module-level functions `rgb_to_hex(red, green, blue)` and
`hex_similar_to_color(h1, h2, tolerance)` work on packed integers.

A tolerance of 0.0 or less requires an exact match. Otherwise two colours
match when the Euclidean distance between their channels is at most
`tolerance * 442`. Each channel difference is taken modulo 256, so 1.0
matches any colour.

### `pixelseek.bitmap`

`Bitmap(buffer, width, height, bytewidth, bits_per_pixel=24,
bytes_per_pixel=None)` is an immutable raster image. Its origin is the top
left. Each row takes `bytewidth` bytes, and a pixel's first three bytes are
blue, green and red. `bytes_per_pixel` defaults to `bits_per_pixel // 8`.

- `copy()` returns an independent copy.
- `copy_portion(rect)` returns the part inside `rect` and keeps the source
  row width. It raises `ValueError` if `rect` does not fit.
- `to_rgb()` swaps the first and third byte of every pixel.
- `bounds()`, `point_in_bounds(point)` and `rect_in_bounds(rect)` give and
  check the bitmap's extent.
- `color_at(x, y)` returns an `RGBColor`.
- `hex_at(x, y)` returns a `0xRRGGBB` integer.
- Both `color_at` and `hex_at` raise `IndexError` outside the bitmap.

`add_padding(width)` rounds a row width in bytes up to a multiple of 4.

### `pixelseek.bmp`

- `read_bmp(path)` and `bitmap_from_bmp_bytes(data)` parse uncompressed 24-
  and 32-bit BMPs with a Windows v3, v4 or v5 header, or with an OS/2 v1
  header. The result is always top-down.
- Failures raise `BMPReadError`. Its `code` attribute is a `BMPErrorCode`,
  and `bmp_error_string(code)` gives the description.
- `create_bitmap_data(bitmap)` returns the bytes of a Windows v3 BMP file,
  with rows stored top-down and padded to 4 bytes.
- `save_bmp(bitmap, path)` writes that file.
- `flip_bitmap_data(data, height, bytewidth)` reverses the order of the rows.

### `pixelseek.fileio`

- `ImageType` has the members `INVALID`, `PNG` and `BMP`.
- `get_extension(fname)` returns the text after the last dot.
- `image_type_from_extension(ext)` maps `"png"` and `"bmp"` to their types,
  ignoring case. Any other extension gives `INVALID`.
- `load_bitmap(path, image_type=None)` and
  `save_bitmap(bitmap, path, image_type=None)` take the type from the file
  extension when none is given. Only BMP is handled; any other type raises
  `UnsupportedImageTypeError`.
- `io_error_string(image_type, error)` describes an error code.

### `pixelseek.color_find`

`find_color(image, color, rect=None, tolerance=0.0)` returns the first
matching `Point`, or `None`. `find_all_color` returns every match in
row-major order, and `count_color` counts the matches. `rect` defaults to the
whole image.

### `pixelseek.bitmap_find`

`find_bitmap(needle, haystack, rect=None, tolerance=0.0)` looks for a smaller
bitmap inside a larger one. `find_all_bitmap` returns every occurrence, and
`count_bitmap` counts them.

A match is reported as the point one past the needle's top-left corner in
both coordinates. A needle whose origin is at (2, 3) is reported as
`Point(3, 4)`. An empty needle raises `ValueError`.

### `pixelseek.codec`

`base64_encode(data)` returns padded base64 with no line breaks. It raises
`ValueError` for empty input.

`base64_decode(data)` accepts bytes or str and skips every character outside
the base64 alphabet, padding included. Each digit is placed by its position
in the input, so noise that shifts the alignment changes the result.

### `pixelseek.deadbeef`

`DeadbeefRandom(seed=0)` is a deterministic 32-bit generator with these
methods:

- `seed(x)` resets the generator to a new seed.
- `rand()` returns a value in 0 to `DEADBEEF_MAX`.
- `uniform(a, b)` returns a float in [a, b).
- `randrange(a, b)` returns an int in [a, b).

`generate_seed()` derives a seed from the clock.

### `pixelseek.alert`

`show_alert(title, msg, default_button=None, cancel_button=None)` opens a
blocking dialog. It uses the first of `gmessage`, `gxmessage`, `kmessage` or
`xmessage` that runs, and then keeps using that one. The default button is
labelled `"OK"` unless another label is given. It returns `True` if the
default button was pressed and `False` otherwise. It raises `AlertError` if
no such program can be run.

## Example

    from pixelseek.bmp import read_bmp
    from pixelseek.color_find import find_color
    from pixelseek.bitmap_find import find_all_bitmap

    screen = read_bmp("screen.bmp")
    icon = read_bmp("icon.bmp")

    where = find_color(screen, 0xFF0000)
    matches = find_all_bitmap(icon, screen, tolerance=0.1)

## What it does not do

- It does not capture the screen and does not drive the mouse or keyboard.
  Bitmaps come only from BMP files or from bytes you supply.
- It cannot read or write PNG files. `ImageType.PNG` is recognised but raises
  `UnsupportedImageTypeError`.
- It does not put images on the clipboard.
- There is no command-line tool.