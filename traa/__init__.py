"""Screen capture building blocks: geometry, regions, frames, cursor pixels, BMP output and logging."""

__version__ = "0.1.0"