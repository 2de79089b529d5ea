"""Labelprint - discover a USB label printer and print ZPL labels to it."""

__version__ = "0.1.0"
