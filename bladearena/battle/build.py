"""Blade builds: aggregate part stats into a single fighter.

A build is one blade plus optional assist, ratchet and bit. Every stat of
the resulting fighter is the plain sum over the parts present; a missing
part or a missing stat contributes 0.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .models import CombatStats, STAT_NAMES

Part = Mapping[str, Any]


@dataclass(frozen=True)
class BladeBuild:
    blade: Part
    assist: Optional[Part] = None
    ratchet: Optional[Part] = None
    bit: Optional[Part] = None

    def parts(self) -> List[Part]:
        return [p for p in (self.blade, self.assist, self.ratchet, self.bit) if p]


@dataclass(frozen=True)
class Fighter:
    id: str
    name: str
    stats: CombatStats
    bit_type: Optional[str] = None
    image_url: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def record(self) -> Dict[str, Any]:
        """Flat record in the shape the metadata readers understand."""
        rec: Dict[str, Any] = dict(self.extra)
        rec.update(self.stats.as_dict())
        rec["name"] = self.name
        if self.bit_type is not None:
            rec["bit_type"] = self.bit_type
        return {k: v for k, v in rec.items() if v is not None}


def apply_build_stats(build: BladeBuild) -> CombatStats:
    totals = {name: 0 for name in STAT_NAMES}
    for part in build.parts():
        for name in STAT_NAMES:
            totals[name] += part.get(name) or 0
    return CombatStats(**totals)


def build_name(build: BladeBuild) -> str:
    pieces = [str(build.blade.get("name", "?"))]
    if build.assist:
        pieces.append(f"+{build.assist.get('name')}")
    if build.ratchet:
        pieces.append(f"-{build.ratchet.get('name')}")
    if build.bit:
        pieces.append(f"-{build.bit.get('name')}")
    return " ".join(pieces)


def image_for(blade: Part) -> str:
    url = blade.get("image_url")
    if not url:
        return "/blades/enemy-default.png"
    return url if str(url).startswith("http") else f"/blades/{url}"


def fighter_from_build(build: BladeBuild, fighter_id: Optional[str] = None, name: Optional[str] = None) -> Fighter:
    bit_type = build.bit.get("type") if build.bit else None
    return Fighter(
        id=fighter_id or str(build.blade.get("blade_id", "")),
        name=name or build_name(build),
        stats=apply_build_stats(build),
        bit_type=bit_type,
        image_url=image_for(build.blade),
        extra={"line": build.blade.get("line")},
    )

__all__ = ["BladeBuild","Fighter","apply_build_stats","build_name","fighter_from_build","image_for"]
