from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List, Optional
from bladearena.core.logging import logger, LEVELS

SETTINGS_FILENAME = ".bladearena_settings.json"
LOG_LEVEL_ENV = "BLADEARENA_LOG_LEVEL"

@dataclass
class SettingsData:
    countdown_delay_ms: int = 800  # pause after each countdown step
    round_delay_ms: int = 500      # pause after each resolved round
    log_level: str = "INFO"        # DEBUG / INFO / WARN / ERROR
    debug: bool = False            # Print every battle log line, not just finishes
    seed: Optional[int] = None     # Fixed RNG seed for reproducible matches

    def normalize(self):
        if not isinstance(self.countdown_delay_ms, int) or self.countdown_delay_ms < 0:
            self.countdown_delay_ms = 800
        if not isinstance(self.round_delay_ms, int) or self.round_delay_ms < 0:
            self.round_delay_ms = 500
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LEVELS:
            self.log_level = "INFO"
        if self.seed is not None and not isinstance(self.seed, int):
            self.seed = None

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = path or cls._resolve_path()
        data = SettingsData()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Backfill missing fields (migration safe)
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                logger.debug("SettingsLoaded", path=str(path))
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
                data = SettingsData()
        env_level = os.environ.get(LOG_LEVEL_ENV)
        if env_level:
            data.log_level = env_level
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def update(self, **changes):
        for k, v in changes.items():
            if not hasattr(self.data, k):
                raise AttributeError(f"unknown setting {k!r}")
            setattr(self.data, k, v)
        self.data.normalize()
        self._notify()

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)

    def apply_log_level(self):
        logger.set_level(self.data.log_level)
