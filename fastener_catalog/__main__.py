import sys

from fastener_catalog.cli import main

sys.exit(main())
