import json
from datetime import datetime, timedelta, timezone

from quest_api import __main__ as entry
from quest_api.clock import FixedClock, SystemClock
from quest_api.generate_openapi import generate_openapi
from quest_api.settings import get_settings


class TestClock:
    def test_system_clock_uses_one_offset(self):
        clock = SystemClock()
        assert clock.now().utcoffset() == clock.now().utcoffset()
        assert clock.now().tzinfo is not None

    def test_system_clock_explicit_zone(self):
        tz = timezone(timedelta(hours=-5))
        clock = SystemClock(tz)
        assert clock.now().utcoffset() == timedelta(hours=-5)
        assert clock.today() == clock.now().date()

    def test_fixed_clock_advance(self):
        start = datetime(2024, 1, 3, 23, 0, tzinfo=timezone.utc)
        clock = FixedClock(start)
        assert clock.now() == start
        clock.advance(timedelta(hours=2))
        assert clock.today().isoformat() == "2024-01-04"


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ["CORS_ALLOW_ORIGINS", "LOG_LEVEL", "HOST", "PORT"]:
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.cors_allow_origins == ["*"]
        assert settings.log_level == "INFO"
        assert settings.host == "0.0.0.0"
        assert settings.port == 8000

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.example, http://b.example,")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "9001")
        settings = get_settings()
        assert settings.cors_allow_origins == ["http://a.example", "http://b.example"]
        assert settings.log_level == "DEBUG"
        assert settings.host == "127.0.0.1"
        assert settings.port == 9001

    def test_invalid_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        monkeypatch.setenv("PORT", "not-a-port")
        settings = get_settings()
        assert settings.log_level == "INFO"
        assert settings.port == 8000


class TestEntryPoint:
    def test_main_runs_uvicorn_with_settings(self, monkeypatch):
        calls = {}

        def fake_run(app, **kwargs):
            calls["app"] = app
            calls.update(kwargs)

        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "8123")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setattr(entry.uvicorn, "run", fake_run)

        entry.main()

        assert calls["host"] == "127.0.0.1"
        assert calls["port"] == 8123
        assert calls["log_level"] == "warning"
        assert calls["app"].title == "Quest API"


class TestGenerateOpenapi:
    def test_writes_schema(self, tmp_path):
        out = tmp_path / "interfaces" / "openapi.json"
        written = generate_openapi(str(out))
        assert written == str(out)
        schema = json.loads(out.read_text(encoding="utf-8"))
        assert "/api/quests" in schema["paths"]
        assert "/api/quests/{quest_id}" in schema["paths"]
        assert "/api/healthchecker" in schema["paths"]
        assert {t["name"] for t in schema["tags"]} >= {"health", "quests"}
