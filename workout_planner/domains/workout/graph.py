from __future__ import annotations

import random
from functools import partial
from typing import Any, Mapping, Optional, Union

from langgraph.graph import START, END, StateGraph
from loguru import logger

from workout_planner.core.audit import append_event
from workout_planner.core.execution import GraphExecutor
from workout_planner.domains.workout.schemas import PlanRequest, WorkoutPlan
from workout_planner.domains.workout.services.retrieval import ExerciseGateway, ExerciseQueryGateway
from workout_planner.domains.workout.state import (
    WorkoutGraphState,
    WorkoutPlanResult,
    init_workout_state,
    to_workout_result,
)
from workout_planner.domains.workout import nodes as workout_nodes
from workout_planner.shared.config import PlannerConfig


def build_workout_graph(
    gateway: Optional[ExerciseGateway] = None,
    settings: Optional[PlannerConfig] = None,
    rng: Optional[random.Random] = None,
):
    """Build the daily workout graph (LangGraph StateGraph)."""
    gateway = gateway or ExerciseQueryGateway()

    builder = StateGraph(WorkoutGraphState)

    builder.add_node("goal", workout_nodes.node_goal)
    builder.add_node("difficulty", workout_nodes.node_difficulty)
    builder.add_node("retrieval", partial(workout_nodes.node_retrieval, gateway=gateway, settings=settings))
    builder.add_node("compose", partial(workout_nodes.node_compose, rng=rng))
    builder.add_node("format", workout_nodes.node_format)
    builder.add_node("empty", workout_nodes.node_empty)

    builder.add_edge(START, "goal")
    builder.add_edge("goal", "difficulty")
    builder.add_edge("difficulty", "retrieval")
    builder.add_edge("retrieval", "compose")

    builder.add_conditional_edges(
        "compose",
        workout_nodes.route_after_compose,
        {
            "format": "format",
            "empty": "empty",  # soft-fail
        },
    )
    builder.add_edge("format", END)
    builder.add_edge("empty", END)

    return builder.compile()


_WORKOUT_GRAPH = None


def get_workout_graph():
    """Lazy-load singleton graph bound to the ORM gateway."""
    global _WORKOUT_GRAPH
    if _WORKOUT_GRAPH is None:
        _WORKOUT_GRAPH = build_workout_graph()
    return _WORKOUT_GRAPH


def run_workout_planning_pipeline(
    request: Union[PlanRequest, Mapping[str, Any]],
    gateway: Optional[ExerciseGateway] = None,
    settings: Optional[PlannerConfig] = None,
    rng: Optional[random.Random] = None,
) -> WorkoutPlanResult:
    """Main entry point: build today's plan and keep the audit trail."""
    if not isinstance(request, PlanRequest):
        request = PlanRequest.model_validate(request)

    init_state = init_workout_state(request)
    init_state["audit"] = append_event(init_state["audit"], "pipeline_start", {
        "indoor_only": request.indoor_only,
        "has_goal": request.goal is not None,
    })

    if gateway is None and settings is None and rng is None:
        graph = get_workout_graph()
    else:
        graph = build_workout_graph(gateway=gateway, settings=settings, rng=rng)

    result = GraphExecutor.execute(graph, init_state, to_workout_result)
    logger.info(
        f"[PIPELINE] request_id={result.request_id} difficulty={result.difficulty.value} "
        f"goal_type={result.goal_type.value} items={len(result.plan.items)}"
    )
    return result


def generate_plan(
    request: Union[PlanRequest, Mapping[str, Any]],
    gateway: Optional[ExerciseGateway] = None,
    settings: Optional[PlannerConfig] = None,
    rng: Optional[random.Random] = None,
) -> WorkoutPlan:
    return run_workout_planning_pipeline(request, gateway=gateway, settings=settings, rng=rng).plan
