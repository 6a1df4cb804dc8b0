"""
Main entry point for running ywm as a module.

Usage:
    python -m ywm <command>
"""

from .helper import main

if __name__ == "__main__":
    import sys

    sys.exit(main())
