from __future__ import annotations

import random
from typing import Any, List, Optional, Sequence, TypeVar

from loguru import logger

from workout_planner.domains.workout.contract import DEFAULT_GOAL_TYPE, GOAL_QUOTAS, CategoryQuota
from workout_planner.domains.workout.schemas import GoalType

T = TypeVar("T")


def _distinct(items: Sequence[T]) -> List[T]:
    # unique by record id, first occurrence wins
    seen = set()
    out: List[T] = []
    for item in items:
        key = getattr(item, "id", None)
        if key is None:
            key = id(item)
        if key in seen:
            continue
        seen.add(key)
        out.append(item)
    return out


def pick_random(items: Optional[Sequence[T]], n: int, rng: Optional[random.Random] = None) -> List[T]:
    """Pick up to n distinct items uniformly at random, in random order."""
    if not items or n <= 0:
        return []
    population = _distinct(items)
    k = min(n, len(population))
    return (rng or random).sample(population, k)


def quota_for(goal_type: GoalType) -> CategoryQuota:
    if goal_type == GoalType.lose_weight:
        return GOAL_QUOTAS["lose_weight"]
    if goal_type == GoalType.gain_muscle:
        return GOAL_QUOTAS["gain_muscle"]
    return GOAL_QUOTAS[DEFAULT_GOAL_TYPE]


def compose(
    strength_pool: Optional[Sequence[Any]],
    cardio_pool: Optional[Sequence[Any]],
    goal_type: GoalType = GoalType.maintain,
    rng: Optional[random.Random] = None,
) -> List[Any]:
    """
    Select today's exercises from the strength and cardio pools.

    Quotas are upper bounds; a short pool yields everything it has.
    Merge order only decides which sub-list comes first.
    """
    quota = quota_for(goal_type)

    strength = pick_random(strength_pool, quota.strength, rng=rng)
    cardio = pick_random(cardio_pool, quota.cardio, rng=rng)

    selected = cardio + strength if quota.cardio_first else strength + cardio

    goal_label = getattr(goal_type, "value", goal_type)
    logger.info(
        f"[PLANNER] goal_type={goal_label} strength={len(strength)}/{quota.strength} "
        f"cardio={len(cardio)}/{quota.cardio} selected={len(selected)}"
    )
    return selected
