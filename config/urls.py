from django.urls import include, path

urlpatterns = [
    path("api/workout/", include("workout_planner.urls")),
]
