from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from loguru import logger

from workout_planner.domains.workout.contract import (
    BEGINNER_MAX_ACTIVITY,
    DEFAULT_ACTIVITY_LEVEL,
    DEFAULT_GOAL_TYPE,
    INTERMEDIATE_MAX_ACTIVITY,
    canonicalize_goal_type,
    is_valid_goal_type,
)
from workout_planner.domains.workout.schemas import Difficulty, GoalType


def _read(obj: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-style object."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _maybe_float(v: Any) -> Optional[float]:
    if v is None:
        return None
    if isinstance(v, (int, float)):
        return float(v)
    s = str(v).strip()
    if not s:
        return None
    try:
        return float(s)
    except ValueError:
        return None


def classify_difficulty(activity_level: float = DEFAULT_ACTIVITY_LEVEL) -> Difficulty:
    """
    Map an activity coefficient to a difficulty tier.

    Upper bounds are inclusive: 1.3 is beginner, 1.6 is intermediate.
    No validation; NaN falls through to advanced.
    """
    if activity_level <= BEGINNER_MAX_ACTIVITY:
        return Difficulty.beginner
    if activity_level <= INTERMEDIATE_MAX_ACTIVITY:
        return Difficulty.intermediate
    return Difficulty.advanced


def resolve_activity_level(profile: Any) -> float:
    # missing, empty or zero coefficient -> default
    return _maybe_float(_read(profile, "activity_level")) or DEFAULT_ACTIVITY_LEVEL


def resolve_goal_type(goal: Any) -> Tuple[GoalType, Optional[str]]:
    """
    Resolve a goal (model, mapping or None) to a GoalType.

    Returns (goal_type, warning). Unknown types fall back to maintain and
    carry a warning message; a missing goal or type is not a warning.
    """
    raw = _read(goal, "type")
    if isinstance(raw, GoalType):
        return raw, None

    goal_type = canonicalize_goal_type(str(raw) if raw is not None else None)
    if not goal_type:
        return GoalType(DEFAULT_GOAL_TYPE), None

    if not is_valid_goal_type(goal_type):
        warning = f"unknown goal type {raw!r}, using {DEFAULT_GOAL_TYPE}"
        logger.warning(f"[PROFILE] {warning}")
        return GoalType(DEFAULT_GOAL_TYPE), warning

    return GoalType(goal_type), None
