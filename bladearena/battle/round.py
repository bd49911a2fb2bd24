"""Single round resolution.

Both blades are adjusted for the arena and their launches, then trade
attack attempts until a finish lands, a blade runs out of stamina, or the
step guard trips. Every attempt is written to the round's battle log.
"""
from __future__ import annotations
import math
import random
from typing import Dict, List, Optional

from bladearena.core.logging import logger
from bladearena.core.types import Side, opposite_side
from .build import Fighter
from .finish import calculate_finish
from .hit import calculate_hit_chance
from .metadata import make_meta_from
from .modifiers import apply_arena_modifiers, apply_launch_modifiers, random_launch
from .models import (
    Actor, BattleEvent, BattleOutcome, CombatStats, FinishFlags, FinishType,
    LaunchType, RoundResult, Winner,
)

MAX_STEPS = 100
SPEND_RATIO = 0.2
POINT_VALUE: Dict[str, int] = {"spin": 1, "over": 2, "burst": 2, "xtreme": 3}

USER_FALLBACK_NAME = "You"
ENEMY_FALLBACK_NAME = "Opponent"


class _Gauge:
    """Propulsion/stamina reserves that drain as a blade attacks."""
    def __init__(self, stats: CombatStats):
        self.propulsion = max(stats.get("propulsion"), 0)
        self.stamina = max(stats.get("stamina"), 0)
        self.base_propulsion = max(stats.get("propulsion"), 1)

    def spend(self):
        # Propulsion burns first; a blade out of speed starts losing spin
        if self.propulsion > 0:
            self.propulsion = max(0, self.propulsion - math.ceil(self.base_propulsion * SPEND_RATIO))
        else:
            self.stamina = max(0, self.stamina - math.floor(self.stamina * SPEND_RATIO))


def score_finishes(user_finish: FinishType, enemy_finish: FinishType) -> tuple[Winner, int, int]:
    """Return (winner, user_points, enemy_points); a spin finish is credited to the blade still spinning."""
    if user_finish == "spin" and enemy_finish != "spin":
        return "user", POINT_VALUE["spin"], 0
    if enemy_finish == "spin" and user_finish != "spin":
        return "enemy", 0, POINT_VALUE["spin"]
    if user_finish not in ("none", "spin"):
        return "user", POINT_VALUE.get(user_finish, 1), 0
    if enemy_finish not in ("none", "spin"):
        return "enemy", 0, POINT_VALUE.get(enemy_finish, 1)
    return "draw", 0, 0


def compute_round(
    user: Fighter,
    enemy: Fighter,
    side: Side,
    user_launch: LaunchType,
    rng: Optional[random.Random] = None,
    enemy_launch: Optional[LaunchType] = None,
) -> RoundResult:
    rng = rng or random.Random()
    u = apply_arena_modifiers(user.stats, side)
    e = apply_arena_modifiers(enemy.stats, opposite_side(side))
    u = apply_launch_modifiers(u, user_launch)
    e = apply_launch_modifiers(e, enemy_launch or random_launch(rng))

    user_meta = make_meta_from(user.record(), USER_FALLBACK_NAME)
    enemy_meta = make_meta_from(enemy.record(), ENEMY_FALLBACK_NAME)

    gauges = {"user": _Gauge(u), "enemy": _Gauge(e)}
    finishes: Dict[str, FinishType] = {"user": "none", "enemy": "none"}
    battle_log: List[BattleEvent] = []
    log = battle_log.append

    turn: Actor = "user" if gauges["user"].propulsion >= gauges["enemy"].propulsion else "enemy"
    steps = 0
    while finishes["user"] == "none" and finishes["enemy"] == "none" and steps < MAX_STEPS:
        steps += 1
        u_out = gauges["user"].stamina <= 0
        e_out = gauges["enemy"].stamina <= 0
        if u_out or e_out:
            if u_out and e_out:
                log(BattleEvent("end", "user", "Both blades run out of spin! Double Spin!"))
                finishes["user"] = finishes["enemy"] = "spin"
            elif u_out:
                log(BattleEvent("finish", "enemy", "Your blade stops spinning: Spin Finish for the opponent!"))
                finishes["enemy"] = "spin"
            else:
                log(BattleEvent("finish", "user", "The opponent stops spinning: Spin Finish for you!"))
                finishes["user"] = "spin"
            break

        atk_stats, def_stats = (u, e) if turn == "user" else (e, u)
        atk_meta, def_meta = (user_meta, enemy_meta) if turn == "user" else (enemy_meta, user_meta)
        name = atk_meta.display_name

        chance = calculate_hit_chance(atk_stats, def_stats, atk_meta, def_meta)
        log(BattleEvent("attack", turn, f"{name} attacks! (accuracy {chance * 100:.0f}%)"))

        if rng.random() < chance:
            finish = calculate_finish(atk_stats, def_stats, rng)
            if finish != "none":
                log(BattleEvent("finish", turn, f"{name} lands a {finish.upper()} FINISH!"))
                finishes[turn] = finish
                break
            log(BattleEvent("attack", turn, f"{name} connects, but no finish."))
        else:
            log(BattleEvent("miss", turn, f"{name} misses!"))

        gauges[turn].spend()
        turn = "enemy" if turn == "user" else "user"

    if finishes["user"] == "none" and finishes["enemy"] == "none":
        log(BattleEvent("end", "user", "Round stopped: too long! Double Spin!"))
        finishes["user"] = finishes["enemy"] = "spin"

    winner, user_points, enemy_points = score_finishes(finishes["user"], finishes["enemy"])
    logger.debug("RoundResolved", winner=winner, user=finishes["user"], enemy=finishes["enemy"], steps=steps)
    outcome = BattleOutcome(
        winner=winner,
        user_result=FinishFlags.from_finish(finishes["user"]),
        enemy_result=FinishFlags.from_finish(finishes["enemy"]),
        user_score=user_points,
        enemy_score=enemy_points,
    )
    return RoundResult(outcome=outcome, user_points=user_points, enemy_points=enemy_points, battle_log=battle_log)

__all__ = ["compute_round","score_finishes","MAX_STEPS","POINT_VALUE"]
