"""Pixel processing service: validated pixel buffers, fixed-order operations, thumbnails."""

__version__ = "1.0.0"
