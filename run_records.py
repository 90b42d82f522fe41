#!/usr/bin/env python3
"""Run a record-keeping program from a source checkout.

Usage:
    ./run_records.py inventory              # default inventory.json
    ./run_records.py inventory my_log.json  # custom path
"""

import sys
from pathlib import Path

# Allow running without installing the package
sys.path.insert(0, str(Path(__file__).parent))

from records.cli import main


if __name__ == "__main__":
    sys.exit(main())
