"""Resistance meter: divider maths, E12 rounding, colour bands and an SSD1306 frame-buffer renderer."""

__version__ = "0.1.0"