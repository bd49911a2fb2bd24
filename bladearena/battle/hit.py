"""Hit probability for a single attack attempt."""
from __future__ import annotations

from .constants import BIT_BASE_HIT, matchup_multiplier
from .models import CombatStats, FighterMeta
from .utils import clamp

HEIGHT_BOUNDS = (0.85, 1.15)
PROPULSION_BOUNDS = (0.9, 1.1)
HIT_BOUNDS = (0.05, 0.95)


def calculate_hit_chance(
    attacker_stats: CombatStats,
    defender_stats: CombatStats,
    attacker_meta: FighterMeta,
    defender_meta: FighterMeta,
) -> float:
    """Base hit for the attacker's archetype, scaled by matchup, height and speed.

    Height and propulsion ratios are capped so neither can swing the odds by
    more than their bounds; the result never reaches a certain hit or miss.
    """
    hit = BIT_BASE_HIT.get(attacker_meta.bit_type, BIT_BASE_HIT["balance"])
    hit *= matchup_multiplier(attacker_meta.bit_type, defender_meta.bit_type)
    hit *= clamp(attacker_meta.height / max(defender_meta.height, 1), *HEIGHT_BOUNDS)
    a_prop = max(attacker_stats.get("propulsion"), 1)
    d_prop = max(defender_stats.get("propulsion"), 1)
    hit *= clamp(a_prop / d_prop, *PROPULSION_BOUNDS)
    return clamp(hit, *HIT_BOUNDS)

__all__ = ["calculate_hit_chance"]
