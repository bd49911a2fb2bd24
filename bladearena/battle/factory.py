"""Factory helpers for constructing fighters from the parts catalogs.

Shared by the battle service, the CLI and tests.
"""
from __future__ import annotations
import random
from typing import Optional, Sequence

from bladearena.core.errors import CatalogError
from bladearena.core.logging import logger
from bladearena.data.loader import load_catalog, get_blade, get_assist, get_ratchet, get_bit
from .build import BladeBuild, Fighter, fighter_from_build

ASSIST_LINE = "CX"

def _pick(rng: random.Random, rows: Sequence[dict]) -> Optional[dict]:
    return dict(rows[rng.randrange(len(rows))]) if rows else None

def generate_enemy(rng: Optional[random.Random] = None) -> Fighter:
    """Roll a random opponent: any blade, plus a ratchet and bit when available.

    Only CX line blades take an assist.
    """
    rng = rng or random.Random()
    blades = load_catalog("blade")
    if not blades:
        raise CatalogError("blade", "no blade available to generate an opponent")
    blade = dict(blades[rng.randrange(len(blades))])
    assist = _pick(rng, load_catalog("assist")) if blade.get("line") == ASSIST_LINE else None
    ratchet = _pick(rng, load_catalog("ratchet"))
    bit = _pick(rng, load_catalog("bit"))
    enemy = fighter_from_build(BladeBuild(blade, assist, ratchet, bit))
    logger.debug("EnemyGenerated", name=enemy.name, attack=enemy.stats.attack, defense=enemy.stats.defense)
    return enemy

def fighter_from_ids(
    blade_id: str,
    *,
    assist_id: Optional[str] = None,
    ratchet_id: Optional[str] = None,
    bit_id: Optional[str] = None,
    fighter_id: Optional[str] = None,
) -> Fighter:
    build = BladeBuild(
        blade=get_blade(blade_id),
        assist=get_assist(assist_id) if assist_id else None,
        ratchet=get_ratchet(ratchet_id) if ratchet_id else None,
        bit=get_bit(bit_id) if bit_id else None,
    )
    return fighter_from_build(build, fighter_id=fighter_id)

__all__ = ["generate_enemy","fighter_from_ids"]
