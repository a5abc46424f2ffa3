"""Compile a directory of SVG icons into one sprite plus derived artifacts."""

__version__ = "0.1.0"
