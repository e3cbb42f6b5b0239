#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--difficulty {easy,medium,hard}] [--seed N]
"""
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from console.cli import main


if __name__ == "__main__":
    main()
