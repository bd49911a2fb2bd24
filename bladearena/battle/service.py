"""Battle service wiring catalogs, countdown and the match loop together.

The service owns no state beyond its settings and RNG; each call to
:meth:`BattleService.play` resolves a full first-to-seven match.
"""
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from bladearena.core.errors import ValidationError
from bladearena.core.logging import logger
from bladearena.core.types import Side, is_side
from bladearena.data.loader import get_launch_type
from bladearena.system.settings import Settings, SettingsData
from .build import Fighter
from .countdown import countdown, DEFAULT_STEPS
from .factory import generate_enemy
from .match import compute_match
from .models import LaunchType, MatchResult, NEUTRAL_LAUNCH, RoundResult

from .utils import flip_arena_side

@dataclass(frozen=True)
class BattleReport:
    user: Fighter
    enemy: Fighter
    side: Side
    launch: LaunchType
    result: MatchResult

class BattleService:
    def __init__(self, settings: Optional[SettingsData] = None, rng: Optional[random.Random] = None):
        self.settings = settings or Settings.load().data
        self.rng = rng or random.Random(self.settings.seed)

    def resolve_launch(self, launch: LaunchType | str | None) -> LaunchType:
        if launch is None:
            return NEUTRAL_LAUNCH
        if isinstance(launch, LaunchType):
            return launch
        return get_launch_type(launch)

    def pick_side(self, side: Optional[str]) -> Side:
        if side is None:
            return flip_arena_side(self.rng)
        side = side.upper()
        if not is_side(side):
            raise ValidationError(f"arena side must be X or B, got {side!r}")
        return side  # type: ignore[return-value]

    async def play(
        self,
        user: Fighter,
        *,
        enemy: Optional[Fighter] = None,
        launch: LaunchType | str | None = None,
        side: Optional[str] = None,
        on_countdown: Optional[Callable[[Optional[str]], None]] = None,
        on_round: Optional[Callable[[RoundResult], None]] = None,
        countdown_steps: Sequence[str] = DEFAULT_STEPS,
    ) -> BattleReport:
        user_launch = self.resolve_launch(launch)
        arena_side = self.pick_side(side)
        foe = enemy or generate_enemy(self.rng)
        logger.info("BattleStart", user=user.name, enemy=foe.name, side=arena_side, launch=user_launch.id)
        if on_countdown is not None:
            await countdown(countdown_steps, on_countdown, self.settings.countdown_delay_ms)
        result = await compute_match(
            user, foe, arena_side, user_launch, on_round,
            rng=self.rng, round_delay_ms=self.settings.round_delay_ms,
        )
        logger.info("BattleEnd", winner=result.winner, user=result.final_user, enemy=result.final_enemy, rounds=len(result.rounds))
        return BattleReport(user=user, enemy=foe, side=arena_side, launch=user_launch, result=result)

__all__ = ["BattleService","BattleReport"]
