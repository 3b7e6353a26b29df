#!/usr/bin/env python
"""Validate a generated catalog artifact.

Usage:
    python scripts/validate_catalog.py [catalog_path] [--rates PATH] [--schema legacy|current]
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastener_catalog.cli import main

if __name__ == "__main__":
    sys.exit(main(["validate", *sys.argv[1:]]))
