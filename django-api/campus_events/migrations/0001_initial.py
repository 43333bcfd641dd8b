import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("date_start", models.DateField()),
                ("date_end", models.DateField()),
                ("time", models.CharField(blank=True, max_length=64)),
                ("venue", models.CharField(blank=True, max_length=255)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("academic", "Academic"),
                            ("cultural", "Cultural"),
                            ("sports", "Sports"),
                            ("technical", "Technical"),
                        ],
                        default="academic",
                        max_length=20,
                    ),
                ),
                ("department", models.CharField(blank=True, max_length=255)),
                ("description", models.TextField(blank=True)),
                ("organizer", models.CharField(blank=True, max_length=255)),
                ("image_url", models.URLField(blank=True, max_length=500, null=True)),
                ("registration_required", models.BooleanField(default=False)),
                ("registration_start", models.DateField(blank=True, null=True)),
                ("registration_end", models.DateField(blank=True, null=True)),
                (
                    "capacity",
                    models.PositiveIntegerField(
                        blank=True, null=True, validators=[django.core.validators.MinValueValidator(1)]
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-date_start", "id"],
                "indexes": [models.Index(fields=["-date_start"], name="event_date_start_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(date_end__gte=models.F("date_start")),
                        name="event_ends_after_start",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(capacity__isnull=True) | models.Q(capacity__gte=1),
                        name="event_capacity_positive",
                    ),
                    models.CheckConstraint(
                        condition=(
                            models.Q(registration_start__isnull=True, registration_end__isnull=True)
                            | models.Q(registration_start__isnull=False, registration_end__isnull=False)
                        ),
                        name="event_registration_window_complete",
                    ),
                    models.CheckConstraint(
                        condition=(
                            models.Q(registration_start__isnull=True)
                            | models.Q(registration_end__isnull=True)
                            | models.Q(registration_end__gte=models.F("registration_start"))
                        ),
                        name="event_registration_window_ordered",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Registration",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("event_id", models.IntegerField()),
                ("user_id", models.CharField(max_length=255)),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=254)),
                (
                    "role",
                    models.CharField(
                        choices=[("student", "Student"), ("faculty", "Faculty"), ("visitor", "Visitor")],
                        max_length=20,
                    ),
                ),
                ("department", models.CharField(blank=True, max_length=255, null=True)),
                ("registered_at", models.DateTimeField()),
                ("ticket", models.CharField(max_length=64, unique=True)),
                ("checked_in", models.BooleanField(default=False)),
                ("checked_in_at", models.DateTimeField(blank=True, null=True)),
                ("position", models.PositiveIntegerField()),
            ],
            options={
                "ordering": ["position"],
                "indexes": [models.Index(fields=["event_id"], name="registration_event_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=["event_id", "user_id"], name="one_registration_per_user")
                ],
            },
        ),
        migrations.CreateModel(
            name="Bookmark",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.CharField(max_length=255)),
                ("event_id", models.IntegerField()),
                ("position", models.PositiveIntegerField()),
            ],
            options={
                "ordering": ["position"],
                "constraints": [
                    models.UniqueConstraint(fields=["user_id", "event_id"], name="one_bookmark_per_event")
                ],
            },
        ),
    ]
