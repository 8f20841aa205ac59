#!/usr/bin/env python3
"""
mdview - markdown viewer and editor for the terminal

Simple usage:
    python viewer.py view notes.md                     # Render a local file
    python viewer.py view https://example.com/a.md     # Render a remote file
    python viewer.py edit notes.md                     # Edit in $EDITOR and save
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from mdview.cli import app

if __name__ == "__main__":
    app()
