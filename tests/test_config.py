"""Tests for settings."""

import pytest
from pydantic import ValidationError

from secretshares.config import Settings, get_settings
from secretshares.engine import SecretSharingEngine


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.default_stat_sec_param == 40
        assert settings.strict_validation is False
        assert settings.primality_rounds == 40
        assert settings.log_level == "WARNING"
        assert settings.log_json is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SECRETSHARES_DEFAULT_STAT_SEC_PARAM", "80")
        monkeypatch.setenv("SECRETSHARES_LOG_JSON", "1")

        settings = Settings()

        assert settings.default_stat_sec_param == 80
        assert settings.log_json is True

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("SECRETSHARES_LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("SECRETSHARES_LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            Settings()

    def test_negative_security_rejected(self, monkeypatch):
        monkeypatch.setenv("SECRETSHARES_DEFAULT_STAT_SEC_PARAM", "-1")

        with pytest.raises(ValidationError):
            Settings()

    def test_cached(self):
        assert get_settings() is get_settings()


class TestEngineSettings:
    """Engine picks up settings."""

    def test_default_stat_sec_param_used(self, fixed_random):
        rng = fixed_random(1)
        engine = SecretSharingEngine(
            random_below=rng,
            settings=Settings(default_stat_sec_param=16),
        )

        engine.share_integers(5, 10, None, 1, 2)

        assert rng.bounds == [2**16 * 4 * 10]

    def test_explicit_strict_overrides_settings(self):
        engine = SecretSharingEngine(
            strict=False,
            settings=Settings(strict_validation=True),
        )

        assert engine.strict is False

    def test_injected_random_source(self, fixed_random):
        engine = SecretSharingEngine(random_below=fixed_random(7))

        shares = engine.share_finite_field(123, 7919, 2, 3)

        assert [s.y for s in shares] == [137, 165, 207]
