"""
Entry point for running the ExtString CLI as a module.

Usage:
    python -m extstring reverse "汉字漢字"
"""

import sys

from extstring.cli import main

if __name__ == "__main__":
    sys.exit(main())
