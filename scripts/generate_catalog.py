#!/usr/bin/env python
"""Generate the catalog artifact from a catalog config.

Usage:
    python scripts/generate_catalog.py [config_path] [out_path]
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastener_catalog.cli import main

if __name__ == "__main__":
    sys.exit(main(["generate", *sys.argv[1:]]))
