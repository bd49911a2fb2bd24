"""First-to-seven match loop."""
from __future__ import annotations
import asyncio
import random
from typing import Callable, List, Optional

from bladearena.core.logging import logger
from bladearena.core.types import Side
from .build import Fighter
from .models import BattleOutcome, LaunchType, MatchResult, RoundResult
from .round import compute_round

TARGET_SCORE = 7
DEFAULT_ROUND_DELAY_MS = 500

RoundCallback = Callable[[RoundResult], None]


async def compute_match(
    user: Fighter,
    enemy: Fighter,
    side: Side,
    user_launch: LaunchType,
    on_round: Optional[RoundCallback] = None,
    *,
    rng: Optional[random.Random] = None,
    round_delay_ms: float = DEFAULT_ROUND_DELAY_MS,
    target: int = TARGET_SCORE,
    enemy_launch: Optional[LaunchType] = None,
) -> MatchResult:
    """Play rounds until either side reaches ``target`` points.

    ``on_round`` receives each round (outcome and battle log) as soon as it
    is resolved; the loop then pauses ``round_delay_ms`` so a front-end can
    show it. The opponent gets a fresh random launch every round unless
    ``enemy_launch`` is given.
    """
    rng = rng or random.Random()
    user_score = 0
    enemy_score = 0
    rounds: List[BattleOutcome] = []
    while user_score < target and enemy_score < target:
        result = compute_round(user, enemy, side, user_launch, rng, enemy_launch)
        rounds.append(result.outcome)
        user_score += result.user_points
        enemy_score += result.enemy_points
        logger.debug("RoundScored", round=len(rounds), user=user_score, enemy=enemy_score)
        if on_round is not None:
            on_round(result)
        await asyncio.sleep(max(0.0, round_delay_ms) / 1000)
    return MatchResult(final_user=user_score, final_enemy=enemy_score, rounds=rounds)

__all__ = ["compute_match","TARGET_SCORE","DEFAULT_ROUND_DELAY_MS"]
