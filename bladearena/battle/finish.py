"""Finish roll after a successful hit.

60% of rolls produce no finish. The remaining 40% is shared between
xtreme, over and burst in proportion to their weights, which all grow
with the attacker's attack / defender's defense ratio.
"""
from __future__ import annotations
import random
from typing import Optional

from .models import CombatStats, FinishType
from .utils import clamp

NONE_PROB_BUDGET = 0.60
FINISH_PROB_BUDGET = 0.40

OVER_WEIGHT, OVER_CAP = 0.07, 0.6
BURST_WEIGHT, BURST_CAP = 0.05, 0.5
XTREME_WEIGHT, XTREME_CAP = 0.03, 0.4


def finish_weights(attacker: CombatStats, defender: CombatStats) -> tuple[float, float, float]:
    """Return the (over, burst, xtreme) weights for this pairing."""
    atk = max(attacker.get("attack"), 1)
    dfn = max(defender.get("defense"), 1)
    ratio = atk / dfn
    over = clamp(OVER_WEIGHT * ratio, 0, OVER_CAP)
    burst = clamp(BURST_WEIGHT * ratio, 0, BURST_CAP)
    xtreme = clamp(XTREME_WEIGHT * ratio, 0, XTREME_CAP)
    return over, burst, xtreme


def calculate_finish(attacker: CombatStats, defender: CombatStats, rng: Optional[random.Random] = None) -> FinishType:
    over, burst, xtreme = finish_weights(attacker, defender)
    total = over + burst + xtreme
    if total <= 0:
        return "none"
    over_p = FINISH_PROB_BUDGET * (over / total)
    burst_p = FINISH_PROB_BUDGET * (burst / total)
    xtreme_p = FINISH_PROB_BUDGET * (xtreme / total)

    roll = (rng or random).random()
    if roll < NONE_PROB_BUDGET:
        return "none"
    r2 = roll - NONE_PROB_BUDGET
    if r2 < xtreme_p:
        return "xtreme"
    if r2 < xtreme_p + over_p:
        return "over"
    if r2 <= xtreme_p + over_p + burst_p:
        return "burst"
    return "none"

__all__ = ["calculate_finish","finish_weights"]
