from __future__ import annotations
import argparse
import asyncio
import os
import random
import sys
from typing import List, Optional

from bladearena.core.errors import BladeArenaError
from bladearena.core.logging import logger
from bladearena.system.settings import LOG_LEVEL_ENV, Settings
from bladearena.battle.factory import fighter_from_ids, generate_enemy
from bladearena.battle.service import BattleService
from bladearena.data.loader import all_launch_types, load_catalog
from bladearena.ui.render import (
    battle_console, countdown_printer, render_matchup, render_round, render_results,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bladearena", description="Play a first-to-seven blade match in the terminal")
    parser.add_argument("--blade", default="dransword", help="Blade id from the parts catalog")
    parser.add_argument("--assist", default=None, help="Assist id (CX blades)")
    parser.add_argument("--ratchet", default="3-60", help="Ratchet id")
    parser.add_argument("--bit", default="rush", help="Bit id")
    parser.add_argument("--launch", default="standard", help="Launch type id")
    parser.add_argument("--side", choices=["X", "B", "x", "b"], default=None, help="Stadium side (random if omitted)")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible match")
    parser.add_argument("--fast", action="store_true", help="Skip countdown and round pauses")
    parser.add_argument("--verbose", action="store_true", help="Show every attack, not only finishes")
    parser.add_argument("--list", action="store_true", help="List catalog ids and exit")
    return parser


def list_catalogs() -> None:
    for name, col in (("blade", "blade_id"), ("assist", "assist_id"), ("ratchet", "ratchet_id"), ("bit", "bit_id")):
        ids = ", ".join(str(r.get(col)) for r in load_catalog(name))
        battle_console.print(f"[bold]{name}[/bold]: {ids}")
    battle_console.print("[bold]launch[/bold]: " + ", ".join(l.id for l in all_launch_types()))


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.load()
    # Outside debug mode, INFO chatter would interleave with the battle panels;
    # an explicit BLADEARENA_LOG_LEVEL always wins
    quiet = not settings.data.debug and not os.environ.get(LOG_LEVEL_ENV)
    if quiet and settings.data.log_level in {"INFO", "DEBUG"}:
        logger.set_level("WARN")
    else:
        settings.apply_log_level()
    if args.list:
        list_catalogs()
        return 0
    data = settings.data
    if args.fast:
        data.countdown_delay_ms = 0
        data.round_delay_ms = 0
    seed = args.seed if args.seed is not None else data.seed
    service = BattleService(data, rng=random.Random(seed))
    verbose = args.verbose or data.debug

    rounds_seen = 0
    def _on_round(result):
        nonlocal rounds_seen
        rounds_seen += 1
        render_round(result, rounds_seen, verbose=verbose)

    try:
        user = fighter_from_ids(args.blade, assist_id=args.assist, ratchet_id=args.ratchet, bit_id=args.bit, fighter_id="user")
        side = service.pick_side(args.side)
        launch = service.resolve_launch(args.launch)
        enemy = generate_enemy(service.rng)
        render_matchup(user, enemy, side)
        report = asyncio.run(service.play(
            user, enemy=enemy, launch=launch, side=side,
            on_countdown=countdown_printer(), on_round=_on_round,
        ))
    except BladeArenaError as e:
        logger.error("BattleAborted", error=str(e))
        battle_console.print(f"[red]{e}[/red]")
        return 2
    render_results(report)
    return 0


if __name__ == "__main__":
    sys.exit(run())
