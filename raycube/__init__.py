"""Grid-based raycasting engine for .cub scene files, with an XPM image reader."""

__version__ = "0.1.0"