"""Archetype (bit type) metadata: colors & abbreviations.

Provides:
  ARCHETYPES: the closed set of bit types, in display order
  ARCHETYPE_COLORS_HEX: mapping archetype -> hex color string (#RRGGBB)
  ARCHETYPE_ABBREVIATIONS: mapping archetype -> 3-letter abbreviation (upper)
  helpers for rich markup and plain-text rendering.
"""
from __future__ import annotations
from typing import Dict, Literal, Tuple
import re

BitType = Literal["attack", "defense", "balance", "stamina"]
Side = Literal["X", "B"]

ARCHETYPES: Tuple[BitType, ...] = ("attack", "defense", "balance", "stamina")
SIDES: Tuple[Side, ...] = ("X", "B")

ARCHETYPE_COLORS_HEX: Dict[str, str] = {
    "attack": "#E74C3C",
    "defense": "#3498DB",
    "balance": "#9B59B6",
    "stamina": "#2ECC71",
}

ARCHETYPE_ABBREVIATIONS: Dict[str, str] = {
    "attack": "ATK",
    "defense": "DEF",
    "balance": "BAL",
    "stamina": "STA",
}

def is_side(value: object) -> bool:
    return isinstance(value, str) and value in SIDES

def opposite_side(side: Side) -> Side:
    return "B" if side == "X" else "X"

def archetype_abbreviation(bit_type: str) -> str:
    return ARCHETYPE_ABBREVIATIONS.get(bit_type.lower(), bit_type[:3].upper())

def archetype_markup(bit_type: str, text: str | None = None) -> str:
    """Wrap ``text`` (default: the abbreviation) in rich color markup."""
    label = text if text is not None else archetype_abbreviation(bit_type)
    hex_val = ARCHETYPE_COLORS_HEX.get(bit_type.lower())
    if not hex_val:
        return label
    return f"[{hex_val}]{label}[/{hex_val}]"

MARKUP_RE = re.compile(r"\[/?#?[0-9A-Za-z_ ]*\]")

def strip_markup(s: str) -> str:
    return MARKUP_RE.sub('', s)

__all__ = [
    'BitType','Side','ARCHETYPES','SIDES','ARCHETYPE_COLORS_HEX','ARCHETYPE_ABBREVIATIONS',
    'is_side','opposite_side',
    'archetype_abbreviation','archetype_markup','strip_markup',
]
