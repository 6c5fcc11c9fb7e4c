#!/usr/bin/env python
"""Predict a matchup from two fighter profile files.

Usage:
    python scripts/predict_matchup.py RED.json BLUE.json [--as-of YYYY-MM-DD] [--json]
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.cli import main

if __name__ == "__main__":
    sys.exit(main())
