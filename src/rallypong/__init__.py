"""Rally Pong: a two-paddle ball game built with pygame."""

__version__ = "0.1.0"
