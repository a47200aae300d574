"""
Entry point for running gitpreview as a module: python -m gitpreview
"""

from gitpreview.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
