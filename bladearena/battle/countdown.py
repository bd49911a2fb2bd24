"""Pre-battle countdown sequencer.

Plays each step through ``on_step`` with a fixed pause after it, then
signals the end with ``on_step(None)``. Runs as one sequential task.
"""
from __future__ import annotations
import asyncio
from typing import Callable, Iterable, Optional

DEFAULT_DELAY_MS = 800
DEFAULT_STEPS = ("3", "2", "1", "Go!")

StepCallback = Callable[[Optional[str]], None]


async def countdown(
    steps: Iterable[str],
    on_step: StepCallback,
    delay_ms: float = DEFAULT_DELAY_MS,
    cancel: Optional[asyncio.Event] = None,
) -> None:
    """Call ``on_step`` with every step in order, waiting ``delay_ms`` after each.

    ``cancel`` is checked before each step; once it is set the remaining
    steps are skipped. The closing ``on_step(None)`` is sent either way.
    """
    delay = max(0.0, delay_ms) / 1000
    for step in steps:
        if cancel is not None and cancel.is_set():
            break
        on_step(step)
        await asyncio.sleep(delay)
    on_step(None)

__all__ = ["countdown","DEFAULT_DELAY_MS","DEFAULT_STEPS"]
