"""Terminal rendering for countdowns, rounds and match results.

Everything prints through a rich Console; pass your own (for example one
writing to a StringIO) to capture output.
"""
from __future__ import annotations
from typing import Callable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.table import Table
from rich.align import Align
from rich.columns import Columns
from rich.box import ROUNDED, DOUBLE

from bladearena.core.types import archetype_markup
from bladearena.battle.build import Fighter
from bladearena.battle.models import BattleOutcome, FinishFlags, RoundResult
from bladearena.battle.service import BattleReport

# Global Rich console for battle output
battle_console = Console()

ACTOR_STYLE = {"user": "bright_cyan", "enemy": "bright_red"}
EVENT_STYLE = {"finish": "bold", "end": "bold yellow", "miss": "dim"}
WINNER_LABEL = {"user": "YOU WIN", "enemy": "YOU LOSE", "draw": "DRAW"}


def countdown_printer(console: Optional[Console] = None) -> Callable[[Optional[str]], None]:
    """Return an ``on_step`` callback that prints each countdown value."""
    con = console or battle_console
    def _on_step(value: Optional[str]) -> None:
        if value is None:
            con.print(Align.center(Text("LET IT RIP!", style="bold bright_yellow")))
            return
        con.print(Align.center(Text(value, style="bold bright_white")))
    return _on_step


def finish_label(flags: FinishFlags) -> str:
    for name in ("xtreme", "over", "burst", "spin"):
        if getattr(flags, name):
            return name.upper()
    return "-"


def fighter_panel(fighter: Fighter, title: str) -> Panel:
    s = fighter.stats
    bit = archetype_markup(fighter.bit_type or "balance")
    body = (
        f"[bold bright_white]{fighter.name}[/bold bright_white] ({bit})\n"
        f"ATK {s.attack or 0}  DEF {s.defense or 0}  STA {s.stamina or 0}\n"
        f"PRO {s.propulsion or 0}  HGT {s.height or 0}  BUR {s.burst or 0}"
    )
    return Panel(body, title=f"[bold]{title}[/bold]", box=ROUNDED, width=44, padding=(0, 1))


def render_matchup(user: Fighter, enemy: Fighter, side: str, console: Optional[Console] = None) -> None:
    con = console or battle_console
    title = Text(f"STADIUM SIDE {side}", style="bold bright_white")
    con.print(Panel(Align.center(title), box=DOUBLE))
    con.print(Align.center(Columns([fighter_panel(user, "YOUR BLADE"), fighter_panel(enemy, "OPPONENT")], padding=(0, 2))))


def render_round(result: RoundResult, number: int, *, verbose: bool = False, console: Optional[Console] = None) -> None:
    con = console or battle_console
    lines = Text()
    for ev in result.battle_log:
        # Quiet mode keeps only the lines that decide the round
        if not verbose and ev.type not in ("finish", "end"):
            continue
        style = EVENT_STYLE.get(ev.type, ACTOR_STYLE.get(ev.actor, ""))
        lines.append(ev.text + "\n", style=style)
    o = result.outcome
    lines.append(f"+{result.user_points} / +{result.enemy_points}", style="bright_white")
    con.print(Panel(lines, title=f"Round {number}: {WINNER_LABEL[o.winner]}", box=ROUNDED, padding=(0, 1)))


def rounds_table(rounds: list[BattleOutcome]) -> Table:
    table = Table(title="Rounds", box=ROUNDED)
    table.add_column("#", justify="right")
    table.add_column("Winner")
    table.add_column("You")
    table.add_column("Opponent")
    table.add_column("Points", justify="right")
    for i, o in enumerate(rounds, 1):
        table.add_row(
            str(i),
            o.winner,
            finish_label(o.user_result),
            finish_label(o.enemy_result),
            f"{o.user_score}-{o.enemy_score}",
        )
    return table


def render_results(report: BattleReport, console: Optional[Console] = None) -> None:
    con = console or battle_console
    res = report.result
    con.print(rounds_table(res.rounds))
    banner = Text(f"{WINNER_LABEL[res.winner]}  {res.final_user} - {res.final_enemy}", style="bold bright_yellow")
    con.print(Align.center(Panel(Align.center(banner), box=DOUBLE, width=60)))

__all__ = [
    "battle_console","countdown_printer","finish_label","fighter_panel",
    "render_matchup","render_round","rounds_table","render_results",
]
