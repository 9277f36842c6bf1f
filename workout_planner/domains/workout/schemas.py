from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from workout_planner.domains.workout.contract import DIFFICULTY_LEVELS, GOAL_TYPE_ENUM


# ============================================================
# Enums
# ============================================================

class Difficulty(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class GoalType(str, Enum):
    lose_weight = "lose_weight"
    gain_muscle = "gain_muscle"
    maintain = "maintain"


# Guard against contract drift
assert tuple(d.value for d in Difficulty) == DIFFICULTY_LEVELS, "Difficulty drifted from DIFFICULTY_LEVELS"
assert tuple(g.value for g in GoalType) == GOAL_TYPE_ENUM, "GoalType drifted from GOAL_TYPE_ENUM"


# ============================================================
# Plan request (input)
# ============================================================

class FitnessProfile(BaseModel):
    model_config = ConfigDict(extra="ignore", from_attributes=True)

    activity_level: Optional[float] = None


class Goal(BaseModel):
    model_config = ConfigDict(extra="ignore", from_attributes=True)

    type: Optional[str] = None


class PlanRequest(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, from_attributes=True)

    user: Any = None
    profile: Optional[FitnessProfile] = None
    goal: Optional[Goal] = None
    indoor_only: bool = True


# ============================================================
# Workout plan (output)
# ============================================================

class RepsPrescription(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sets: int = Field(ge=1)
    reps: int = Field(ge=1)


class DurationPrescription(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sets: int = Field(ge=1)
    duration_seconds: int = Field(gt=0)


Prescription = Union[DurationPrescription, RepsPrescription]


class PlanItem(BaseModel):
    exercise_id: Any
    name: str
    muscle_group: Optional[str] = ""
    category: str
    difficulty: str
    equipment: List[str] = Field(default_factory=list)
    is_indoor: bool
    demo_url: Optional[str] = None
    description: Optional[str] = ""
    prescription: Prescription


class WorkoutPlan(BaseModel):
    items: List[PlanItem] = Field(default_factory=list)
    note: Optional[str] = None
