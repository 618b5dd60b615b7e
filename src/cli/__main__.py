"""Main entry point for ``python -m src.cli``."""
import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
