"""
Main entry point for the tigress_http package.

Allows running the CLI as: python -m tigress_http
"""

import sys

from tigress_http.cli import main

if __name__ == "__main__":
    sys.exit(main())
