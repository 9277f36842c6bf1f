from django.apps import AppConfig


class WorkoutPlannerConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "workout_planner"
    verbose_name = "Daily workout planner"
