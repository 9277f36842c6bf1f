"""Tests for turning catalog records into plan items."""

from workout_planner.domains.workout.contract import EMPTY_CATALOG_NOTE
from workout_planner.domains.workout.schemas import DurationPrescription, RepsPrescription
from workout_planner.domains.workout.services.formatting import (
    empty_plan,
    format_exercise,
    format_plan,
)

from tests.conftest import make_exercise


def test_time_based_prescription():
    ex = make_exercise(name="Plank", muscle_group="core", default_duration=30)
    item = format_exercise(ex)

    assert isinstance(item.prescription, DurationPrescription)
    assert item.prescription.model_dump() == {"sets": 3, "duration_seconds": 30}


def test_time_based_keeps_catalog_sets():
    ex = make_exercise(default_duration=45, default_sets=4, default_reps=10)
    assert format_exercise(ex).prescription.model_dump() == {"sets": 4, "duration_seconds": 45}


def test_zero_duration_is_rep_based():
    ex = make_exercise(default_duration=0, default_sets=5, default_reps=8)
    item = format_exercise(ex)

    assert isinstance(item.prescription, RepsPrescription)
    assert item.prescription.model_dump() == {"sets": 5, "reps": 8}


def test_missing_defaults_fall_back():
    ex = make_exercise(default_duration=None, default_sets=None, default_reps=None)
    assert format_exercise(ex).prescription.model_dump() == {"sets": 3, "reps": 12}


def test_descriptive_fields_pass_through():
    ex = make_exercise(
        name="Rowing machine",
        category="cardio",
        muscle_group="back",
        difficulty="intermediate",
        is_indoor=True,
        equipment=["rower"],
        demo_url="https://example.com/row.mp4",
        description="Steady pace",
    )
    data = format_exercise(ex).model_dump()

    assert data["exercise_id"] == ex.id
    assert data["name"] == "Rowing machine"
    assert data["category"] == "cardio"
    assert data["muscle_group"] == "back"
    assert data["difficulty"] == "intermediate"
    assert data["is_indoor"] is True
    assert data["equipment"] == ["rower"]
    assert data["demo_url"] == "https://example.com/row.mp4"
    assert data["description"] == "Steady pace"


def test_format_plan_preserves_order():
    selected = [make_exercise(name="A"), make_exercise(name="B", default_duration=20)]
    plan = format_plan(selected)

    assert plan.note is None
    assert [i.name for i in plan.items] == ["A", "B"]


def test_empty_plan_has_note():
    plan = empty_plan()
    assert plan.items == []
    assert plan.note == EMPTY_CATALOG_NOTE
