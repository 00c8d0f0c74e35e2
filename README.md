# pixpaint

A small raster paint program built on pygame. It opens a 1920×1080 window
titled "my paint" on a white canvas. You paint with a square brush, pick
colours and brush sizes from small palettes, and save or clear the image.

## Installation

```
pip install .
```

## Running

```
pixpaint                 # the image is saved as my_image.jpg
pixpaint drawing.png     # the image is saved as drawing.png
pixpaint -h              # prints usage help and exits
```

The first argument is the file name the image is saved under; its
extension decides the format pygame writes. Any further arguments are
ignored. The command always exits with status 1.

## Using the toolbar

The toolbar in the top-left corner has three buttons:

1. **Pencil**: choose a colour (red, green, blue, cyan, magenta, yellow or
   black), then a brush size (4, 8, 12 or 16 pixels).
2. **Eraser**: sets the brush colour to white, then lets you choose a
   brush size.
3. **File**: save the image under the save name, start a fresh blank
   canvas, or open an image (see below).

While a palette or menu is shown, the program waits for a left click on
one of its buttons; moving the mouse highlights the button under it.

Press or drag with the left mouse button on the canvas to paint. The brush
starts black and 15 pixels wide. Clicks and strokes closer to the window
edge than half the brush size are ignored. Close the window to quit.

Button icons are loaded from a `button/` directory relative to the current
working directory (for example `button/write.png`, `button/colo_1.png`,
`button/taille_1.png`, `button/s_file.png`). Icons that cannot be loaded
are simply not drawn; the buttons still respond at their positions.

## Using it from Python

```python
from pixpaint.app import PaintApp

PaintApp("out.png", "old.png").run()
```

`PaintApp(save_name, open_file)` takes the save path and, optionally, the
image that the "open" button loads. Besides `run()`, it offers
`paint_at(pos)`, `apply_button(button)`, `choose(buttons)` and
`render(highlight)`.

`pixpaint.canvas` holds the canvas and brush helpers (`new_canvas`,
`stamp_brush`, `is_paintable`, `PaintState`), and `pixpaint.layout`
describes the toolbar, palettes and file menu (`main_toolbar`,
`colour_palette`, `size_palette`, `file_menu`, `hit_test`, `Button`,
`Region`, `Tool`, `FileAction`).

## What it does not do

- The `pixpaint` command gives no way to name an image to open, so the
  "open" button does nothing there. Only `PaintApp(..., open_file)` from
  Python sets it.
- No icon images ship with the package.
- There is no undo, no colour picker beyond the seven colours, and no
  brush shape other than a square.

## Running the tests

```
pip install .[test]
pytest
```