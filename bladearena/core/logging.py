"""
Lightweight structured logger used across the engine.
Colors each level with colorama; extras are rendered as key=value pairs.
"""
from __future__ import annotations
import os
import sys
from datetime import datetime, timezone
from typing import Literal, Any, TextIO

from colorama import Fore, Style, init as colorama_init

Level = Literal["DEBUG","INFO","WARN","ERROR"]

colorama_init()

COLORS = {
    "DEBUG": Fore.BLUE,
    "INFO": Fore.GREEN,
    "WARN": Fore.YELLOW,
    "ERROR": Fore.RED,
}
RESET = Style.RESET_ALL
LEVELS = ("DEBUG","INFO","WARN","ERROR")

class Logger:
    _order = {"DEBUG":10,"INFO":20,"WARN":30,"ERROR":40}
    def __init__(self, level: Level = "INFO", stream: TextIO | None = None):
        self.threshold = self._order[level]
        self.stream = stream

    def set_level(self, level: str):
        self.threshold = self._order.get(level.upper(), 20)

    def is_enabled(self, lvl: Level) -> bool:
        return self._order[lvl] >= self.threshold

    def _emit(self, lvl: Level, msg: str, **extra: Any):
        if not self.is_enabled(lvl):
            return
        ts = datetime.now(timezone.utc).isoformat(timespec="seconds")
        extras = ""
        if extra:
            extras = " " + " ".join(f"{k}={v}" for k, v in extra.items())
        out = self.stream or sys.stderr
        out.write(f"{COLORS[lvl]}{ts} [{lvl}] {msg}{extras}{RESET}\n")

    def debug(self, msg: str, **kw): self._emit("DEBUG", msg, **kw)
    def info(self, msg: str, **kw): self._emit("INFO", msg, **kw)
    def warn(self, msg: str, **kw): self._emit("WARN", msg, **kw)
    def error(self, msg: str, **kw): self._emit("ERROR", msg, **kw)

def _initial_level() -> Level:
    lvl = os.environ.get("BLADEARENA_LOG_LEVEL", "INFO").upper()
    return lvl if lvl in LEVELS else "INFO"  # type: ignore[return-value]

logger = Logger(_initial_level())
