from rest_framework import generics
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status


from .models import Exercise
from .serializers import ExerciseSerializer

from workout_planner.serializers_plan import WorkoutPlanGenerateSerializer
from workout_planner.domains.workout import run_workout_planning_pipeline


class ExerciseListView(generics.ListAPIView):
    queryset = Exercise.objects.all().order_by("id")
    serializer_class = ExerciseSerializer


class WorkoutPlanGenerateView(APIView):
    def post(self, request):
        ser = WorkoutPlanGenerateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        user = getattr(request, "user", None)
        if user is not None and not getattr(user, "is_authenticated", False):
            user = None

        result = run_workout_planning_pipeline(ser.to_plan_request(user=user))

        return Response({
            "request_id": result.request_id,
            "plan": result.plan.model_dump(mode="json"),
            "difficulty": result.difficulty.value,
            "goal_type": result.goal_type.value,
            "warnings": result.warnings,
        }, status=status.HTTP_200_OK)
