from rest_framework import serializers
from .models import Exercise

class ExerciseSerializer(serializers.ModelSerializer):
    class Meta:
        model = Exercise
        fields = [
            "id",
            "name",
            "category",
            "muscle_group",
            "difficulty",
            "is_indoor",
            "equipment",
            "demo_url",
            "description",
            "default_sets",
            "default_reps",
            "default_duration",
        ]
