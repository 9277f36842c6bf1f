"""Shared fixtures for planner tests.

The fake gateway serves unsaved Exercise instances from memory and records
every filter it receives, so pipeline tests need no database.
"""

import itertools
from typing import Any, Dict, List

import pytest

from workout_planner.domains.workout.services.retrieval import ExerciseFilter
from workout_planner.models import Exercise
from workout_planner.shared.config import PlannerConfig

_ids = itertools.count(1000)


def make_exercise(**overrides: Any) -> Exercise:
    fields: Dict[str, Any] = {
        "id": next(_ids),
        "name": "Push-up",
        "category": "strength",
        "muscle_group": "chest",
        "difficulty": "beginner",
        "is_indoor": True,
        "equipment": [],
        "demo_url": None,
        "description": "",
        "default_sets": None,
        "default_reps": None,
        "default_duration": None,
    }
    fields.update(overrides)
    return Exercise(**fields)


def make_pool(category: str, size: int, **overrides: Any) -> List[Exercise]:
    return [
        make_exercise(name=f"{category} #{i}", category=category, **overrides)
        for i in range(size)
    ]


class FakeGateway:
    """In-memory catalog keyed by category / muscle group."""

    def __init__(self, strength=None, cardio=None, core=None):
        self.strength = strength
        self.cardio = cardio
        self.core = core
        self.calls: List[ExerciseFilter] = []

    def find(self, flt: ExerciseFilter):
        self.calls.append(flt)
        if flt.category == "strength":
            return self.strength
        if flt.category == "cardio":
            return self.cardio
        if flt.muscle_group == "core":
            return self.core
        return []


class FailingGateway:
    def find(self, flt: ExerciseFilter):
        raise ConnectionError("catalog unavailable")


@pytest.fixture
def sequential_config() -> PlannerConfig:
    return PlannerConfig(concurrent_fetch=False, fetch_core_pool=True)


@pytest.fixture
def large_gateway() -> FakeGateway:
    return FakeGateway(
        strength=make_pool("strength", 10),
        cardio=make_pool("cardio", 10),
        core=make_pool("strength", 4, muscle_group="core"),
    )


@pytest.fixture
def empty_gateway() -> FakeGateway:
    return FakeGateway(strength=[], cardio=[], core=[])
