from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence

from django.db import connections
from loguru import logger

from workout_planner.domains.workout.contract import (
    CARDIO_CATEGORY,
    CORE_MUSCLE_GROUP,
    STRENGTH_CATEGORY,
)
from workout_planner.models import Exercise
from workout_planner.shared.config import PlannerConfig, get_planner_config


@dataclass(frozen=True)
class ExerciseFilter:
    difficulty: str
    is_indoor: Optional[bool] = None
    category: Optional[str] = None
    muscle_group: Optional[str] = None

    def as_lookup(self) -> Dict[str, Any]:
        lookup: Dict[str, Any] = {"difficulty": self.difficulty}
        if self.is_indoor is not None:
            lookup["is_indoor"] = self.is_indoor
        if self.category:
            lookup["category"] = self.category
        if self.muscle_group:
            lookup["muscle_group"] = self.muscle_group
        return lookup


class ExerciseGateway(Protocol):
    def find(self, flt: ExerciseFilter) -> Sequence[Any]:
        ...


class ExerciseQueryGateway:
    """Catalog gateway backed by the Exercise table."""

    def find(self, flt: ExerciseFilter) -> List[Exercise]:
        return list(Exercise.objects.filter(**flt.as_lookup()).order_by("id"))


@dataclass
class CandidatePools:
    strength: List[Any] = field(default_factory=list)
    cardio: List[Any] = field(default_factory=list)
    # fetched but not drawn from by the composer
    core: List[Any] = field(default_factory=list)

    def sizes(self) -> Dict[str, int]:
        return {"strength": len(self.strength), "cardio": len(self.cardio), "core": len(self.core)}


def build_pool_filters(difficulty: str, indoor_only: bool, fetch_core_pool: bool = True) -> Dict[str, ExerciseFilter]:
    is_indoor = True if indoor_only else None
    filters = {
        "strength": ExerciseFilter(difficulty=difficulty, is_indoor=is_indoor, category=STRENGTH_CATEGORY),
        "cardio": ExerciseFilter(difficulty=difficulty, is_indoor=is_indoor, category=CARDIO_CATEGORY),
    }
    if fetch_core_pool:
        filters["core"] = ExerciseFilter(difficulty=difficulty, is_indoor=is_indoor, muscle_group=CORE_MUSCLE_GROUP)
    return filters


def _fetch(gateway: ExerciseGateway, flt: ExerciseFilter) -> List[Any]:
    return list(gateway.find(flt) or [])


def _fetch_in_thread(gateway: ExerciseGateway, flt: ExerciseFilter) -> List[Any]:
    try:
        return _fetch(gateway, flt)
    finally:
        # worker threads own their DB connections
        connections.close_all()


def acquire_pools(
    gateway: ExerciseGateway,
    difficulty: str,
    indoor_only: bool = True,
    config: Optional[PlannerConfig] = None,
) -> CandidatePools:
    """
    Fetch the strength, cardio and core pools for a difficulty tier.

    A None result counts as an empty pool. Gateway errors propagate.
    """
    cfg = config or get_planner_config()
    difficulty = getattr(difficulty, "value", difficulty)
    filters = build_pool_filters(difficulty, indoor_only, fetch_core_pool=cfg.fetch_core_pool)

    if cfg.concurrent_fetch:
        with ThreadPoolExecutor(max_workers=max(1, min(cfg.max_fetch_workers, len(filters)))) as pool:
            futures = {name: pool.submit(_fetch_in_thread, gateway, flt) for name, flt in filters.items()}
            results = {name: fut.result() for name, fut in futures.items()}
    else:
        results = {name: _fetch(gateway, flt) for name, flt in filters.items()}

    pools = CandidatePools(
        strength=results.get("strength", []),
        cardio=results.get("cardio", []),
        core=results.get("core", []),
    )
    logger.info(f"[RETRIEVAL] difficulty={difficulty} indoor_only={indoor_only} pool_sizes={pools.sizes()}")
    return pools
