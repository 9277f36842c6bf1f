"""Tests for candidate pool acquisition."""

import pytest

from workout_planner.domains.workout.schemas import Difficulty
from workout_planner.domains.workout.services.retrieval import (
    ExerciseFilter,
    ExerciseQueryGateway,
    acquire_pools,
    build_pool_filters,
)
from workout_planner.models import Exercise
from workout_planner.shared.config import PlannerConfig

from tests.conftest import FailingGateway, FakeGateway, make_pool


def test_filters_scope_indoor_and_category():
    filters = build_pool_filters("beginner", indoor_only=True)

    assert filters["strength"] == ExerciseFilter(difficulty="beginner", is_indoor=True, category="strength")
    assert filters["cardio"] == ExerciseFilter(difficulty="beginner", is_indoor=True, category="cardio")
    assert filters["core"] == ExerciseFilter(difficulty="beginner", is_indoor=True, muscle_group="core")


def test_filters_without_indoor_restriction():
    filters = build_pool_filters("advanced", indoor_only=False, fetch_core_pool=False)

    assert set(filters) == {"strength", "cardio"}
    assert filters["strength"].as_lookup() == {"difficulty": "advanced", "category": "strength"}


def test_none_results_become_empty_pools(sequential_config):
    gateway = FakeGateway(strength=None, cardio=make_pool("cardio", 2), core=None)
    pools = acquire_pools(gateway, Difficulty.beginner, config=sequential_config)

    assert pools.strength == []
    assert len(pools.cardio) == 2
    assert pools.core == []
    assert pools.sizes() == {"strength": 0, "cardio": 2, "core": 0}


def test_enum_difficulty_reaches_gateway_as_value(sequential_config):
    gateway = FakeGateway(strength=[], cardio=[], core=[])
    acquire_pools(gateway, Difficulty.intermediate, config=sequential_config)

    assert {flt.difficulty for flt in gateway.calls} == {"intermediate"}
    assert len(gateway.calls) == 3


def test_core_pool_can_be_skipped():
    gateway = FakeGateway(strength=[], cardio=[], core=make_pool("strength", 3))
    pools = acquire_pools(gateway, "beginner", config=PlannerConfig(fetch_core_pool=False))

    assert pools.core == []
    assert all(flt.muscle_group is None for flt in gateway.calls)


def test_concurrent_fetch_matches_sequential(large_gateway, sequential_config):
    sequential = acquire_pools(large_gateway, "beginner", config=sequential_config)
    concurrent = acquire_pools(large_gateway, "beginner", config=PlannerConfig(concurrent_fetch=True))

    assert [ex.id for ex in concurrent.strength] == [ex.id for ex in sequential.strength]
    assert [ex.id for ex in concurrent.cardio] == [ex.id for ex in sequential.cardio]
    assert [ex.id for ex in concurrent.core] == [ex.id for ex in sequential.core]


@pytest.mark.parametrize("concurrent_fetch", [False, True])
def test_gateway_errors_propagate(concurrent_fetch):
    with pytest.raises(ConnectionError):
        acquire_pools(FailingGateway(), "beginner", config=PlannerConfig(concurrent_fetch=concurrent_fetch))


@pytest.mark.django_db
class TestExerciseQueryGateway:
    @pytest.fixture(autouse=True)
    def catalog(self):
        Exercise.objects.create(name="Squat", category="strength", muscle_group="legs", difficulty="beginner")
        Exercise.objects.create(name="Crunch", category="strength", muscle_group="core", difficulty="beginner")
        Exercise.objects.create(
            name="Trail run", category="cardio", muscle_group="legs", difficulty="beginner", is_indoor=False,
        )
        Exercise.objects.create(name="Jump rope", category="cardio", muscle_group="calves", difficulty="beginner")
        Exercise.objects.create(name="Deadlift", category="strength", muscle_group="back", difficulty="advanced")

    def test_filters_by_difficulty_and_category(self):
        found = ExerciseQueryGateway().find(ExerciseFilter(difficulty="beginner", category="strength"))
        assert [ex.name for ex in found] == ["Squat", "Crunch"]

    def test_indoor_filter(self):
        gateway = ExerciseQueryGateway()
        indoor = gateway.find(ExerciseFilter(difficulty="beginner", is_indoor=True, category="cardio"))
        anywhere = gateway.find(ExerciseFilter(difficulty="beginner", category="cardio"))

        assert [ex.name for ex in indoor] == ["Jump rope"]
        assert [ex.name for ex in anywhere] == ["Trail run", "Jump rope"]

    def test_muscle_group_filter(self):
        found = ExerciseQueryGateway().find(ExerciseFilter(difficulty="beginner", muscle_group="core"))
        assert [ex.name for ex in found] == ["Crunch"]

    def test_no_match_is_empty_list(self):
        found = ExerciseQueryGateway().find(ExerciseFilter(difficulty="intermediate", category="cardio"))
        assert found == []


def test_concurrent_fetch_with_zero_workers(large_gateway):
    pools = acquire_pools(large_gateway, "beginner", config=PlannerConfig(concurrent_fetch=True, max_fetch_workers=0))
    assert pools.sizes() == {"strength": 10, "cardio": 10, "core": 4}
