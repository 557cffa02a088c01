#!/usr/bin/env python3
"""
SeatSort - Odd/Even Seat Mapping

Main entry point. Loads or generates integers, classifies them into odd and
even partitions, sorts both, prints the seat map and exports CSV files.

Examples:
    python3 main.py
    python3 main.py --config custom.yaml
    python3 main.py --random 60 --mode front_back --odd-side second
    python3 main.py --help
"""

import sys
from pathlib import Path

# Add project root to path if needed
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from seatsort.cli import main


if __name__ == "__main__":
    sys.exit(main())
