from .graph import generate_plan, run_workout_planning_pipeline
from .schemas import PlanRequest, WorkoutPlan
from .state import WorkoutPlanResult

__all__ = [
    "generate_plan",
    "run_workout_planning_pipeline",
    "PlanRequest",
    "WorkoutPlan",
    "WorkoutPlanResult",
]
