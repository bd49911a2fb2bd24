from __future__ import annotations
import random
from typing import Optional

from bladearena.core.types import Side

def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))

def flip_arena_side(rng: Optional[random.Random] = None) -> Side:
    """Coin toss for the user's side of the stadium."""
    roll = (rng or random).random()
    return "X" if roll < 0.5 else "B"

__all__ = ["clamp","flip_arena_side"]
