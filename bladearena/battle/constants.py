"""Hit-chance tables keyed by bit archetype.

BIT_BASE_HIT is the starting probability for the attacker's archetype
(attack > balance > defense > stamina). BIT_VS_BIT_HIT_MULT scales it by
the (attacker, defender) pairing; entries stay within 0.85-1.20.
"""
from __future__ import annotations
from typing import Dict

BIT_VS_BIT_HIT_MULT: Dict[str, Dict[str, float]] = {
    "attack":  {"attack": 1.2,  "defense": 1.15, "balance": 1.0, "stamina": 0.9},
    "defense": {"attack": 1.15, "defense": 1.2,  "balance": 1.0, "stamina": 0.9},
    "balance": {"attack": 1.0,  "defense": 1.0,  "balance": 1.0, "stamina": 1.0},
    "stamina": {"attack": 1.1,  "defense": 0.95, "balance": 1.0, "stamina": 1.2},
}

BIT_BASE_HIT: Dict[str, float] = {
    "attack":  0.70,
    "balance": 0.68,
    "defense": 0.66,
    "stamina": 0.64,
}

def matchup_multiplier(attacker: str, defender: str) -> float:
    return BIT_VS_BIT_HIT_MULT.get(attacker, {}).get(defender, 1.0)

__all__ = ["BIT_VS_BIT_HIT_MULT","BIT_BASE_HIT","matchup_multiplier"]
