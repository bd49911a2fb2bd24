#!/usr/bin/env python3
"""
Blade Arena - terminal battle

Thin wrapper around :func:`bladearena.cli.run`. The engine itself lives in
the bladearena package:
- battle: stat modifiers, hit/finish rolls, rounds, matches, countdown
- data: parts and launch catalogs
- ui: rich rendering

To run: python main.py --help
"""
import sys

from bladearena.cli import run

if __name__ == "__main__":
    sys.exit(run())
