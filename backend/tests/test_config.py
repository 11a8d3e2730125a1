"""Tests for environment-driven settings."""

import os

import pytest

from backend.config import Settings


class TestSettingsFromEnv:

    def test_defaults(self):
        for name in ("FRONTEND_URL", "LOG_LEVEL", "DEFAULT_BAND_COUNTS", "E_SERIES"):
            os.environ.pop(name, None)
        settings = Settings.from_env()
        assert settings.frontend_url is None
        assert settings.log_level == "INFO"
        assert settings.default_band_counts == (4, 5, 6)
        assert settings.e_series is None

    def test_overrides(self):
        os.environ["FRONTEND_URL"] = "https://calc.example.com"
        os.environ["LOG_LEVEL"] = "debug"
        os.environ["DEFAULT_BAND_COUNTS"] = "5, 4"
        os.environ["E_SERIES"] = "E12"
        settings = Settings.from_env()
        assert settings.frontend_url == "https://calc.example.com"
        assert settings.log_level == "DEBUG"
        assert settings.default_band_counts == (5, 4)
        assert settings.e_series == "E12"

    @pytest.mark.parametrize("raw", ["3", "4,7", ","])
    def test_bad_band_counts(self, raw):
        os.environ["DEFAULT_BAND_COUNTS"] = raw
        with pytest.raises(ValueError):
            Settings.from_env()

    def test_unknown_series(self):
        os.environ["E_SERIES"] = "E7"
        with pytest.raises(ValueError, match="E_SERIES"):
            Settings.from_env()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
