"""A small pygame raster paint program with pencil, eraser, colour, size and file tools."""

__version__ = "0.1.0"
__all__ = ["__version__"]