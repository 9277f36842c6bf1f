from __future__ import annotations

import random
from typing import Any, Dict, Optional

from loguru import logger

from workout_planner.core.audit import append_event
from workout_planner.domains.workout.state import WorkoutGraphState
from workout_planner.domains.workout.services.profile import (
    classify_difficulty,
    resolve_activity_level,
    resolve_goal_type,
)
from workout_planner.domains.workout.services.retrieval import ExerciseGateway, acquire_pools
from workout_planner.domains.workout.services.planning import compose
from workout_planner.domains.workout.services.formatting import empty_plan, format_plan
from workout_planner.shared.config import PlannerConfig


def node_goal(state: WorkoutGraphState) -> Dict[str, Any]:
    goal_type, warning = resolve_goal_type(state["request"].goal)

    warnings = list(state.get("warnings", []))
    if warning:
        warnings.append({"type": "unknown_goal_type", "detail": warning})

    audit = append_event(state["audit"], "goal_resolved", {"goal_type": goal_type.value})
    return {"goal_type": goal_type, "warnings": warnings, "audit": audit}


def node_difficulty(state: WorkoutGraphState) -> Dict[str, Any]:
    activity_level = resolve_activity_level(state["request"].profile)
    difficulty = classify_difficulty(activity_level)
    audit = append_event(state["audit"], "difficulty_done", {
        "activity_level": activity_level,
        "difficulty": difficulty.value,
    })
    return {"difficulty": difficulty, "audit": audit}


def node_retrieval(
    state: WorkoutGraphState,
    gateway: ExerciseGateway,
    settings: Optional[PlannerConfig] = None,
) -> Dict[str, Any]:
    pools = acquire_pools(
        gateway,
        state["difficulty"],
        indoor_only=state["request"].indoor_only,
        config=settings,
    )
    audit = append_event(state["audit"], "retrieval_done", {"pool_sizes": pools.sizes()})
    return {"pools": pools, "audit": audit}


def node_compose(state: WorkoutGraphState, rng: Optional[random.Random] = None) -> Dict[str, Any]:
    pools = state["pools"]
    selected = compose(pools.strength, pools.cardio, state["goal_type"], rng=rng)
    audit = append_event(state["audit"], "compose_done", {
        "selected": len(selected),
        "selected_ids": [getattr(ex, "id", None) for ex in selected],
    })
    return {"selected": selected, "audit": audit}


def route_after_compose(state: WorkoutGraphState) -> str:
    """Nothing selected -> soft-fail with an advisory note, never an error."""
    return "format" if state.get("selected") else "empty"


def node_format(state: WorkoutGraphState) -> Dict[str, Any]:
    plan = format_plan(state["selected"])
    audit = append_event(state["audit"], "format_done", {"items": len(plan.items)})
    return {"plan": plan, "audit": audit}


def node_empty(state: WorkoutGraphState) -> Dict[str, Any]:
    logger.warning(
        f"[PIPELINE] empty catalog for difficulty={state['difficulty'].value} "
        f"goal_type={state['goal_type'].value}, returning advisory note"
    )
    plan = empty_plan()
    audit = append_event(state["audit"], "empty_catalog", {"note": plan.note})
    return {"plan": plan, "audit": audit}
