#!/usr/bin/env python3
"""
DevWatch Runner Script.

Runs the watcher straight from a checkout, without installing it.
Requires Python 3.11+.

Usage:
    python scripts/watch.py [DIRECTORY ...] [--config watch.json]
"""

import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from watcher.cli import main


if __name__ == "__main__":
    sys.exit(main())
