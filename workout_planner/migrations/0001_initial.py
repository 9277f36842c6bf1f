from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Exercise",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("strength", "Strength"),
                            ("cardio", "Cardio"),
                            ("flexibility", "Flexibility"),
                            ("other", "Other"),
                        ],
                        db_index=True,
                        max_length=32,
                    ),
                ),
                ("muscle_group", models.CharField(blank=True, db_index=True, default="", max_length=64)),
                (
                    "difficulty",
                    models.CharField(
                        choices=[
                            ("beginner", "Beginner"),
                            ("intermediate", "Intermediate"),
                            ("advanced", "Advanced"),
                        ],
                        db_index=True,
                        max_length=16,
                    ),
                ),
                ("is_indoor", models.BooleanField(default=True)),
                ("equipment", models.JSONField(blank=True, default=list)),
                ("demo_url", models.URLField(blank=True, null=True)),
                ("description", models.TextField(blank=True, default="")),
                ("default_sets", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("default_reps", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("default_duration", models.PositiveIntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["difficulty", "is_indoor", "category"], name="wk_ex_diff_indoor_cat"),
                ],
            },
        ),
    ]
