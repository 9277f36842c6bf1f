from __future__ import annotations

from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

from workout_planner.core.audit import new_audit
from workout_planner.core.state import BaseGraphState, BaseResult, generate_request_id
from workout_planner.domains.workout.schemas import Difficulty, GoalType, PlanRequest, WorkoutPlan
from workout_planner.domains.workout.services.retrieval import CandidatePools


class WorkoutGraphState(BaseGraphState, total=False):
    """Workout-specific state"""
    request: PlanRequest
    goal_type: GoalType
    difficulty: Difficulty
    pools: CandidatePools
    selected: List[Any]
    plan: Optional[WorkoutPlan]


@dataclass
class WorkoutPlanResult(BaseResult):
    """Workout plan result"""
    plan: WorkoutPlan = field(default_factory=WorkoutPlan)
    goal_type: Optional[GoalType] = None
    difficulty: Optional[Difficulty] = None
    pool_sizes: Dict[str, int] = field(default_factory=dict)


def init_workout_state(request: PlanRequest) -> WorkoutGraphState:
    return WorkoutGraphState(
        request_id=generate_request_id(),
        request=request,
        pools=CandidatePools(),
        selected=[],
        plan=None,
        issues=[],
        warnings=[],
        audit=new_audit(),
    )


def to_workout_result(state: WorkoutGraphState) -> WorkoutPlanResult:
    pools = state.get("pools") or CandidatePools()
    return WorkoutPlanResult(
        request_id=state["request_id"],
        plan=state.get("plan") or WorkoutPlan(),
        goal_type=state.get("goal_type"),
        difficulty=state.get("difficulty"),
        pool_sizes=pools.sizes(),
        issues=state.get("issues", []),
        warnings=state.get("warnings", []),
        audit=state.get("audit", new_audit()),
    )
