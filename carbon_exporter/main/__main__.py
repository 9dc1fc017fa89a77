"""
Main module entry point.

This allows running the exporter as: python -m carbon_exporter.main
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
