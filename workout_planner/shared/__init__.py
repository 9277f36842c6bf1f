from .config import PlannerConfig, get_planner_config

__all__ = ["PlannerConfig", "get_planner_config"]
