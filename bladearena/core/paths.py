"""
Centralized path helpers (flat layout).
"""
from __future__ import annotations
from pathlib import Path

# This file lives at bladearena/core/paths.py
PACKAGE = Path(__file__).resolve().parents[1]   # the 'bladearena' package directory
ROOT = PACKAGE.parent
ASSETS = PACKAGE / "assets"
PARTS = ASSETS / "parts"
BLADES = PARTS / "blades.json"
ASSISTS = PARTS / "assists.json"
RATCHETS = PARTS / "ratchets.json"
BITS = PARTS / "bits.json"
LAUNCH_TYPES = PARTS / "launch_types.json"
