"""Baseline JPEG decoding to PPM and PGM images, with a command and a timing tool."""

__version__ = "0.1.0"