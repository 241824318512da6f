#!/usr/bin/env python3
"""
Top-level launcher for the number game.

Examples:
  python main.py
  python main.py --seed 123 --commands "start" "guess 5" "help"
"""
import sys
from numguess.terminal.main import main

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
