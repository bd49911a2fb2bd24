import json

from bladearena.system.settings import Settings, SettingsData


def test_defaults_when_file_missing(tmp_path, monkeypatch):
    monkeypatch.delenv("BLADEARENA_LOG_LEVEL", raising=False)
    s = Settings.load(tmp_path / "settings.json")
    assert s.data == SettingsData()


def test_save_and_reload(tmp_path, monkeypatch):
    monkeypatch.delenv("BLADEARENA_LOG_LEVEL", raising=False)
    path = tmp_path / "settings.json"
    s = Settings.load(path)
    s.update(round_delay_ms=0, seed=1234)
    s.save()
    again = Settings.load(path)
    assert again.data.round_delay_ms == 0
    assert again.data.seed == 1234


def test_parse_failure_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("BLADEARENA_LOG_LEVEL", raising=False)
    path = tmp_path / "settings.json"
    path.write_text("[1, 2", encoding="utf-8")
    assert Settings.load(path).data == SettingsData()


def test_normalize_and_unknown_keys(tmp_path, monkeypatch):
    monkeypatch.delenv("BLADEARENA_LOG_LEVEL", raising=False)
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"countdown_delay_ms": -5, "log_level": "chatty", "seed": "abc", "theme": "neon"}))
    data = Settings.load(path).data
    assert data.countdown_delay_ms == 800
    assert data.log_level == "INFO"
    assert data.seed is None


def test_env_overrides_log_level(tmp_path, monkeypatch):
    monkeypatch.setenv("BLADEARENA_LOG_LEVEL", "debug")
    assert Settings.load(tmp_path / "settings.json").data.log_level == "DEBUG"


def test_listeners_notified(tmp_path):
    s = Settings.load(tmp_path / "settings.json")
    seen = []
    s.on_change(seen.append)
    s.update(debug=True)
    assert seen and seen[0].debug is True
