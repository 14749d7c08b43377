"""Wireframe viewer for height-map files, with an XPM image reader."""

__version__ = "0.1.0"