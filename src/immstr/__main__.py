"""
Entry point for running the immstr CLI as a module.

Usage:
    python -m immstr upper "hello"
"""

import sys

from immstr.cli import main

if __name__ == "__main__":
    sys.exit(main())
