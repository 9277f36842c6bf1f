from django.urls import path
from .views import ExerciseListView, WorkoutPlanGenerateView

urlpatterns = [
    path("exercises/", ExerciseListView.as_view(), name="exercise-list"),
    path("plan/generate/", WorkoutPlanGenerateView.as_view(), name="workout-plan-generate"),
]
