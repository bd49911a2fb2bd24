"""Value types shared by the battle engine.

Every record here is immutable: modifiers and aggregators build new
instances with :func:`dataclasses.replace` instead of mutating inputs.
"""
from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Literal, Mapping, Optional
import random

from bladearena.core.types import BitType

DEFAULT_STAT = 50

STAT_NAMES: tuple[str, ...] = ("attack", "defense", "stamina", "propulsion", "height", "burst", "weight")

FinishType = Literal["none", "spin", "over", "burst", "xtreme"]
Actor = Literal["user", "enemy"]
Winner = Literal["user", "enemy", "draw"]
EventType = Literal["attack", "miss", "finish", "stamina", "end"]


@dataclass(frozen=True)
class CombatStats:
    attack: Optional[int] = None
    defense: Optional[int] = None
    stamina: Optional[int] = None
    propulsion: Optional[int] = None
    height: Optional[float] = None
    burst: Optional[int] = None
    weight: Optional[float] = None

    def get(self, name: str) -> float:
        """Return the stat, or DEFAULT_STAT when it is absent."""
        value = getattr(self, name)
        return DEFAULT_STAT if value is None else value

    def with_stats(self, **changes: Any) -> "CombatStats":
        return replace(self, **changes)

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "CombatStats":
        # Unknown keys (ids, names, image urls...) are ignored
        return cls(**{k: raw[k] for k in STAT_NAMES if raw.get(k) is not None})


@dataclass(frozen=True)
class LaunchType:
    id: str
    name: str
    level: int = 1
    attack_modifier: Optional[float] = None
    defense_modifier: Optional[float] = None
    stamina_modifier: Optional[float] = None
    propulsion_modifier: Optional[float] = None
    # Finish modifiers are stored with the launch but not read by the engine yet
    spin_modifier: Optional[float] = None
    over_modifier: Optional[float] = None
    burst_modifier: Optional[float] = None
    xtreme_modifier: Optional[float] = None
    selfko_modifier: Optional[float] = None
    skill_id: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "LaunchType":
        names = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in raw.items() if k in names}
        kwargs.setdefault("id", str(raw.get("launch_type_id", "")))
        kwargs.setdefault("name", kwargs["id"])
        return cls(**kwargs)


NEUTRAL_LAUNCH = LaunchType(id="neutral", name="Neutral Launch")


@dataclass(frozen=True)
class FighterMeta:
    bit_type: BitType
    height: float
    display_name: str


@dataclass(frozen=True)
class BattleEvent:
    type: EventType
    actor: Actor
    text: str


@dataclass(frozen=True)
class FinishFlags:
    spin: bool = False
    over: bool = False
    burst: bool = False
    xtreme: bool = False

    @classmethod
    def from_finish(cls, finish: FinishType) -> "FinishFlags":
        return cls(
            spin=finish == "spin",
            over=finish == "over",
            burst=finish == "burst",
            xtreme=finish == "xtreme",
        )

    def count(self) -> int:
        return sum((self.spin, self.over, self.burst, self.xtreme))


@dataclass(frozen=True)
class Percentages:
    spin: float = 0
    over: float = 0
    burst: float = 0
    xtreme: float = 0


@dataclass(frozen=True)
class BattleOutcome:
    winner: Winner
    user_result: FinishFlags
    enemy_result: FinishFlags
    user_score: int = 0
    enemy_score: int = 0
    # Odds are only filled by the one-shot compute_outcome; rounds leave them at zero
    user_percent: Percentages = field(default_factory=Percentages)
    enemy_percent: Percentages = field(default_factory=Percentages)


@dataclass(frozen=True)
class RoundResult:
    outcome: BattleOutcome
    user_points: int
    enemy_points: int
    battle_log: List[BattleEvent] = field(default_factory=list)


@dataclass(frozen=True)
class MatchResult:
    final_user: int
    final_enemy: int
    rounds: List[BattleOutcome] = field(default_factory=list)

    @property
    def winner(self) -> Winner:
        if self.final_user > self.final_enemy:
            return "user"
        if self.final_enemy > self.final_user:
            return "enemy"
        return "draw"


# ---------------------------------------------------------------------------
# Entity helpers
# ---------------------------------------------------------------------------

def has_battle_stats(obj: object) -> bool:
    if isinstance(obj, CombatStats):
        return True
    if not isinstance(obj, Mapping):
        return False
    return any(k in obj for k in STAT_NAMES)


def to_battle_entity(obj: CombatStats | Mapping[str, Any] | None) -> CombatStats:
    """Fill every absent stat with DEFAULT_STAT (weight defaults to 0)."""
    if not has_battle_stats(obj):
        return CombatStats(
            attack=DEFAULT_STAT, defense=DEFAULT_STAT, stamina=DEFAULT_STAT,
            height=DEFAULT_STAT, propulsion=DEFAULT_STAT, burst=DEFAULT_STAT, weight=0,
        )
    stats = obj if isinstance(obj, CombatStats) else CombatStats.from_mapping(obj)  # type: ignore[arg-type]
    return CombatStats(
        attack=stats.get("attack"),
        defense=stats.get("defense"),
        stamina=stats.get("stamina"),
        height=stats.get("height"),
        propulsion=stats.get("propulsion"),
        burst=stats.get("burst"),
        weight=stats.weight if stats.weight is not None else 0,
    )


# ---------------------------------------------------------------------------
# One-shot outcome (pre-round engine, still used for quick previews)
# ---------------------------------------------------------------------------

def _pct(v: float) -> float:
    return min(100, max(0, v))

def calc_percent(a: CombatStats, b: CombatStats) -> Percentages:
    a_w = a.weight or 0
    b_w = b.weight or 0
    return Percentages(
        spin=_pct(a.get("stamina") + a.get("defense") + a_w - b.get("attack") + 30),
        burst=_pct(a.get("attack") + a.get("propulsion") - b.get("defense") - b_w + 50),
        over=_pct(a.get("propulsion") + a.get("attack") - b.get("height") - b.get("defense") + 50),
        xtreme=_pct(a.get("attack") + a.get("propulsion") - a_w - b.get("defense") + 50),
    )

def roll_flags(p: Percentages, rng: random.Random) -> FinishFlags:
    def roll(chance: float) -> bool:
        return rng.random() * 100 < chance
    return FinishFlags(spin=roll(p.spin), over=roll(p.over), burst=roll(p.burst), xtreme=roll(p.xtreme))

def compute_outcome(user: CombatStats, enemy: CombatStats, rng: Optional[random.Random] = None) -> BattleOutcome:
    rng = rng or random.Random()
    u = to_battle_entity(user)
    e = to_battle_entity(enemy)
    user_percent = calc_percent(u, e)
    enemy_percent = calc_percent(e, u)
    user_result = roll_flags(user_percent, rng)
    enemy_result = roll_flags(enemy_percent, rng)
    user_score = user_result.count()
    enemy_score = enemy_result.count()
    winner: Winner = "user" if user_score > enemy_score else "enemy" if enemy_score > user_score else "draw"
    return BattleOutcome(
        winner=winner,
        user_result=user_result,
        enemy_result=enemy_result,
        user_score=user_score,
        enemy_score=enemy_score,
        user_percent=user_percent,
        enemy_percent=enemy_percent,
    )

__all__ = [
    "DEFAULT_STAT","STAT_NAMES","CombatStats","LaunchType","NEUTRAL_LAUNCH","FighterMeta",
    "BattleEvent","FinishFlags","Percentages","BattleOutcome","RoundResult","MatchResult",
    "FinishType","Actor","Winner","has_battle_stats","to_battle_entity","calc_percent",
    "roll_flags","compute_outcome",
]
