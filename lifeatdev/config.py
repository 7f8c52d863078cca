from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


BASE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = BASE_DIR.parent

# Support both root-level and package-local .env files.
load_dotenv(PROJECT_ROOT / ".env")
load_dotenv(BASE_DIR / ".env")


def _env_int(default: int, *keys: str, minimum: int = 0) -> int:
    for key in keys:
        raw = os.getenv(key)
        if raw is None:
            continue
        try:
            return max(minimum, int(raw))
        except ValueError:
            continue
    return max(minimum, default)


def _env_float(default: float, *keys: str, minimum: float = 0.0, maximum: float = 1.0) -> float:
    for key in keys:
        raw = os.getenv(key)
        if raw is None:
            continue
        try:
            value = float(raw)
            return max(minimum, min(maximum, value))
        except ValueError:
            continue
    return max(minimum, min(maximum, default))


def _env_optional_int(*keys: str) -> Optional[int]:
    for key in keys:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            continue
        try:
            return int(raw)
        except ValueError:
            continue
    return None


def _env_flag(default: bool, *keys: str) -> bool:
    for key in keys:
        raw = os.getenv(key)
        if raw is None:
            continue
        return raw.strip().lower() in ("1", "true", "yes", "on")
    return default


class LifeAtDevConfig:
    """
    Centralized tuning config for the career engine.
    Edit defaults here or override via .env.

    Rules that define the game itself (score tables, interview threshold,
    stat bounds) live in utils.constants and are not tunable.
    """

    class SETTLEMENT:
        # Delay before the post-settlement world event lands
        EVENT_DELAY_SECONDS = _env_float(
            0.5,
            "LIFEATDEV_EVENT_DELAY",
            "EVENT_DELAY",
            maximum=30.0,
        )

    class EVENTS:
        # Cycle through the universal events instead of drawing at random
        DETERMINISTIC = _env_flag(False, "LIFEATDEV_DETERMINISTIC_EVENTS")
        ACTION_EVENT_CHANCE = _env_float(0.3, "LIFEATDEV_ACTION_EVENT_CHANCE")
        ACTION_EVENT_DELAY_SECONDS = _env_float(
            0.5,
            "LIFEATDEV_ACTION_EVENT_DELAY",
            maximum=30.0,
        )

    class INTERVIEW:
        FAIL_STRESS = _env_int(10, "LIFEATDEV_INTERVIEW_FAIL_STRESS")

    class RANDOM:
        SEED = _env_optional_int("LIFEATDEV_SEED")

    class LOGGING:
        DEBUG_MODE = _env_flag(False, "DEBUG_MODE")
        LOG_FILE = os.getenv("LIFEATDEV_LOG_FILE") or os.getenv("LOG_FILE")
