from __future__ import annotations

from typing import Any, Iterable

from workout_planner.domains.workout.contract import DEFAULT_REPS, DEFAULT_SETS, EMPTY_CATALOG_NOTE
from workout_planner.domains.workout.schemas import (
    DurationPrescription,
    PlanItem,
    Prescription,
    RepsPrescription,
    WorkoutPlan,
)


def is_time_based(exercise: Any) -> bool:
    duration = getattr(exercise, "default_duration", None)
    return bool(duration) and duration > 0


def build_prescription(exercise: Any) -> Prescription:
    sets = getattr(exercise, "default_sets", None) or DEFAULT_SETS
    if is_time_based(exercise):
        # e.g. 3 sets x 30 seconds
        return DurationPrescription(sets=sets, duration_seconds=exercise.default_duration)
    return RepsPrescription(sets=sets, reps=getattr(exercise, "default_reps", None) or DEFAULT_REPS)


def format_exercise(exercise: Any) -> PlanItem:
    return PlanItem(
        exercise_id=exercise.id,
        name=exercise.name,
        muscle_group=getattr(exercise, "muscle_group", ""),
        category=exercise.category,
        difficulty=exercise.difficulty,
        equipment=list(getattr(exercise, "equipment", None) or []),
        is_indoor=bool(getattr(exercise, "is_indoor", False)),
        demo_url=getattr(exercise, "demo_url", None),
        description=getattr(exercise, "description", ""),
        prescription=build_prescription(exercise),
    )


def format_plan(selected: Iterable[Any]) -> WorkoutPlan:
    return WorkoutPlan(items=[format_exercise(ex) for ex in selected], note=None)


def empty_plan() -> WorkoutPlan:
    return WorkoutPlan(items=[], note=EMPTY_CATALOG_NOTE)
