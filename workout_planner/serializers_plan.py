from rest_framework import serializers

from workout_planner.domains.workout.contract import GOAL_TYPE_ENUM
from workout_planner.domains.workout.schemas import PlanRequest


class WorkoutPlanGenerateSerializer(serializers.Serializer):
    # activity coefficient, roughly 1.0-2.5; not range-checked by the planner
    activity_level = serializers.FloatField(required=False, allow_null=True, default=None)
    goal_type = serializers.ChoiceField(choices=list(GOAL_TYPE_ENUM), required=False, allow_null=True, default=None)
    indoor_only = serializers.BooleanField(required=False, default=True)

    def to_plan_request(self, user=None) -> PlanRequest:
        data = self.validated_data
        goal_type = data.get("goal_type")
        return PlanRequest(
            user=user,
            profile={"activity_level": data.get("activity_level")},
            goal={"type": goal_type} if goal_type else None,
            indoor_only=data.get("indoor_only", True),
        )
