"""A side-scrolling platform game: world simulation, canvas rendering and a terminal menu."""

__version__ = "0.1.0"