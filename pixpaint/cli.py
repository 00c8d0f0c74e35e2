"""Command-line entry point of the paint editor."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pixpaint.app import PaintApp
from pixpaint.canvas import DEFAULT_SAVE_NAME


def help_text() -> str:
    """Return the usage text shown for ``-h``."""
    return (
        "To launch the program you must call my_paint the optional"
        " arguments that you can put afterwards are, the save name "
        "of the file with its type if this is not specified the image"
        " will be called my_image.jpg the second parameter is the "
        "name of an image that you would like to open. The first "
        "button allows you to choose the pencil as well as the color "
        "and then the writing size.\nThe second button allows you to "
        "choose the eraser and its size.\nThe third button allows you"
        " to save the image, reset it, and open another image.\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Show help for ``-h``, otherwise open the editor."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args and args[0] == "-h":
        sys.stdout.write(help_text())
        return 1
    save_name = args[0] if args else DEFAULT_SAVE_NAME
    PaintApp(save_name).run()
    return 1


if __name__ == "__main__":
    sys.exit(main())