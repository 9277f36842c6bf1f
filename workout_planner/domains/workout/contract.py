# workout_planner/domains/workout/contract.py
from __future__ import annotations

from typing import Dict, NamedTuple, Optional, Tuple


# ============================================================
# Taxonomy / Enums (single source of truth)
# ============================================================

DIFFICULTY_LEVELS: Tuple[str, ...] = ("beginner", "intermediate", "advanced")

GOAL_TYPE_ENUM: Tuple[str, ...] = ("lose_weight", "gain_muscle", "maintain")
GOAL_TYPE_ENUM_SET = set(GOAL_TYPE_ENUM)
DEFAULT_GOAL_TYPE = "maintain"

STRENGTH_CATEGORY = "strength"
CARDIO_CATEGORY = "cardio"
CORE_MUSCLE_GROUP = "core"


# ============================================================
# Difficulty inference thresholds (upper bound inclusive)
# ============================================================

DEFAULT_ACTIVITY_LEVEL = 1.2
BEGINNER_MAX_ACTIVITY = 1.3
INTERMEDIATE_MAX_ACTIVITY = 1.6


# ============================================================
# Prescription defaults (applied at format time only)
# ============================================================

DEFAULT_SETS = 3
DEFAULT_REPS = 12

EMPTY_CATALOG_NOTE = (
    "The exercise catalog does not have enough data for this profile yet. "
    "Ask an administrator to add some exercises first."
)


# ============================================================
# Goal -> category quotas
# ============================================================

class CategoryQuota(NamedTuple):
    strength: int
    cardio: int
    cardio_first: bool


GOAL_QUOTAS: Dict[str, CategoryQuota] = {
    "lose_weight": CategoryQuota(strength=3, cardio=2, cardio_first=True),
    "gain_muscle": CategoryQuota(strength=5, cardio=1, cardio_first=False),
    "maintain": CategoryQuota(strength=3, cardio=1, cardio_first=False),
}


# ============================================================
# Helpers
# ============================================================

def canonicalize_goal_type(goal_type: Optional[str]) -> str:
    return (goal_type or "").strip().lower()


def is_valid_goal_type(goal_type: Optional[str]) -> bool:
    return canonicalize_goal_type(goal_type) in GOAL_TYPE_ENUM_SET


def max_items_for_goal(goal_type: str) -> int:
    """Upper bound on plan size for a goal (sum of its quotas)."""
    quota = GOAL_QUOTAS.get(canonicalize_goal_type(goal_type), GOAL_QUOTAS[DEFAULT_GOAL_TYPE])
    return quota.strength + quota.cardio
