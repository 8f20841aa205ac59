"""mdview - markdown viewer and editor for the terminal."""

__version__ = "0.1.0"
