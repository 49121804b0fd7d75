"""Entry point for running livelines as a module.

Usage: python -m livelines demo
"""

import sys

from livelines.main import main

if __name__ == "__main__":
    sys.exit(main())
