from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class PlannerConfig:
    concurrent_fetch: bool = False
    fetch_core_pool: bool = True
    max_fetch_workers: int = 3

    @staticmethod
    def from_env() -> "PlannerConfig":
        return PlannerConfig(
            concurrent_fetch=_env_flag("WORKOUT_CONCURRENT_FETCH", False),
            fetch_core_pool=_env_flag("WORKOUT_FETCH_CORE_POOL", True),
            max_fetch_workers=max(1, int(os.getenv("WORKOUT_MAX_FETCH_WORKERS") or 3)),
        )


_CONFIG: Optional[PlannerConfig] = None


def get_planner_config() -> PlannerConfig:
    """Lazy-load config from env once per process."""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = PlannerConfig.from_env()
    return _CONFIG
