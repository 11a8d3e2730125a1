"""Runtime settings for the calculator API, read from the environment."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from calc_engine.eseries import E_SERIES

load_dotenv()


def _band_counts(raw: str) -> tuple[int, ...]:
    counts = tuple(int(part) for part in raw.split(",") if part.strip())
    if not counts or any(c not in (4, 5, 6) for c in counts):
        raise ValueError(f"DEFAULT_BAND_COUNTS must list 4, 5 or 6, got {raw!r}")
    return counts


@dataclass(frozen=True)
class Settings:
    frontend_url: Optional[str] = None
    log_level: str = "INFO"
    default_band_counts: tuple[int, ...] = (4, 5, 6)
    e_series: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        e_series = os.getenv("E_SERIES") or None
        if e_series is not None and e_series not in E_SERIES:
            raise ValueError(f"E_SERIES must be one of {list(E_SERIES)}, got {e_series!r}")
        return cls(
            frontend_url=os.getenv("FRONTEND_URL") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            default_band_counts=_band_counts(os.getenv("DEFAULT_BAND_COUNTS", "4,5,6")),
            e_series=e_series,
        )


settings = Settings.from_env()


def get_settings() -> Settings:
    """FastAPI dependency; override in tests via app.dependency_overrides."""
    return settings
