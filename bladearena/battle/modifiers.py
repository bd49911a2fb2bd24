"""Arena and launch stat modifiers.

Both functions are pure: they return a new CombatStats and floor every
value they touch. Absent stats count as DEFAULT_STAT, absent launch
modifiers as 1.
"""
from __future__ import annotations
import math
import random
from typing import Optional

from bladearena.core.types import Side
from .models import CombatStats, LaunchType, DEFAULT_STAT

ARENA_BOOST = 1.2
ARENA_PENALTY = 0.8
RANDOM_LAUNCH_SPREAD = 0.1


def _scaled(value: Optional[float], mult: Optional[float]) -> int:
    base = DEFAULT_STAT if value is None else value
    return math.floor(base * (1 if mult is None else mult))


def apply_arena_modifiers(fighter: CombatStats, side: Side) -> CombatStats:
    # X favours propulsion, B favours stamina; the other stat takes the penalty
    prop_mult = ARENA_BOOST if side == "X" else ARENA_PENALTY
    stam_mult = ARENA_BOOST if side == "B" else ARENA_PENALTY
    return fighter.with_stats(
        propulsion=_scaled(fighter.propulsion, prop_mult),
        stamina=_scaled(fighter.stamina, stam_mult),
    )


def apply_launch_modifiers(fighter: CombatStats, launch: LaunchType) -> CombatStats:
    return fighter.with_stats(
        attack=_scaled(fighter.attack, launch.attack_modifier),
        defense=_scaled(fighter.defense, launch.defense_modifier),
        stamina=_scaled(fighter.stamina, launch.stamina_modifier),
        propulsion=_scaled(fighter.propulsion, launch.propulsion_modifier),
    )


def random_launch(rng: Optional[random.Random] = None) -> LaunchType:
    """Launch used for generated opponents: each stat modifier within ±10%."""
    rng = rng or random.Random()
    def jitter() -> float:
        return 1 + (rng.random() * 2 * RANDOM_LAUNCH_SPREAD - RANDOM_LAUNCH_SPREAD)
    return LaunchType(
        id="rand",
        name="Random Launch",
        level=1,
        attack_modifier=jitter(),
        defense_modifier=jitter(),
        stamina_modifier=jitter(),
        propulsion_modifier=jitter(),
        spin_modifier=1, over_modifier=1, burst_modifier=1, xtreme_modifier=1, selfko_modifier=1,
    )

__all__ = ["apply_arena_modifiers","apply_launch_modifiers","random_launch"]
