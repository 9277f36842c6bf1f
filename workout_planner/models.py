from django.db import models


class Exercise(models.Model):
    class Category(models.TextChoices):
        STRENGTH = "strength", "Strength"
        CARDIO = "cardio", "Cardio"
        FLEXIBILITY = "flexibility", "Flexibility"
        OTHER = "other", "Other"

    class Difficulty(models.TextChoices):
        BEGINNER = "beginner", "Beginner"
        INTERMEDIATE = "intermediate", "Intermediate"
        ADVANCED = "advanced", "Advanced"

    name = models.CharField(max_length=255)
    category = models.CharField(max_length=32, choices=Category.choices, db_index=True)
    muscle_group = models.CharField(max_length=64, blank=True, default="", db_index=True)
    difficulty = models.CharField(max_length=16, choices=Difficulty.choices, db_index=True)
    is_indoor = models.BooleanField(default=True)

    equipment = models.JSONField(default=list, blank=True)
    demo_url = models.URLField(blank=True, null=True)
    description = models.TextField(blank=True, default="")

    # null = no catalog default; the plan formatter fills these in
    default_sets = models.PositiveSmallIntegerField(null=True, blank=True)
    default_reps = models.PositiveSmallIntegerField(null=True, blank=True)
    default_duration = models.PositiveIntegerField(null=True, blank=True)  # seconds

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["difficulty", "is_indoor", "category"], name="wk_ex_diff_indoor_cat"),
        ]

    def __str__(self) -> str:
        return self.name
