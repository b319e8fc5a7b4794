"""Tests for app.core.config — environment-driven Settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from app.core.config import Settings, get_settings


class TestDefaults:
    def test_starts_without_any_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("PROJECT_NAME", "PORT", "HOST", "LOG_LEVEL", "RELOAD", "ALLOWED_ORIGINS"):
            monkeypatch.delenv(key, raising=False)
        settings = Settings(_env_file=None)
        assert settings.PROJECT_NAME == "Hello Service"
        assert settings.PROJECT_VERSION == "1.0.0"
        assert settings.HOST == "0.0.0.0"
        assert settings.PORT == 8000
        assert settings.RELOAD is False
        assert settings.LOG_LEVEL == "INFO"
        assert settings.ALLOWED_ORIGINS == ["*"]

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestOverrides:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9001")
        monkeypatch.setenv("RELOAD", "true")
        monkeypatch.setenv("ALLOWED_ORIGINS", '["http://localhost:5500"]')
        settings = Settings(_env_file=None)
        assert settings.PORT == 9001
        assert settings.RELOAD is True
        assert settings.ALLOWED_ORIGINS == ["http://localhost:5500"]

    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PROJECT_NAME", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("PROJECT_NAME=From File\nUNRELATED_KEY=ignored\n", encoding="utf-8")
        settings = Settings(_env_file=env_file)
        assert settings.PROJECT_NAME == "From File"

    @pytest.mark.parametrize("raw, expected", [("debug", "DEBUG"), (" Warning ", "WARNING"), ("ERROR", "ERROR")])
    def test_log_level_is_normalized(self, raw: str, expected: str) -> None:
        assert Settings(_env_file=None, LOG_LEVEL=raw).LOG_LEVEL == expected


class TestValidation:
    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(_env_file=None, LOG_LEVEL="chatty")

    @pytest.mark.parametrize("port", [0, 70000])
    def test_rejects_out_of_range_port(self, port: int) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, PORT=port)
