import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("full_name", models.CharField(max_length=200)),
                ("role", models.CharField(choices=[("student", "Student"), ("supervisor", "Supervisor"), ("coordinator", "Coordinator")], default="student", max_length=20)),
                ("id_number", models.CharField(blank=True, max_length=50)),
                ("employee_number", models.CharField(blank=True, max_length=50)),
                ("program", models.CharField(blank=True, max_length=200)),
                ("faculty", models.CharField(blank=True, max_length=200)),
                ("research_areas", models.JSONField(blank=True, default=list)),
                ("current_groups", models.PositiveIntegerField(default=0)),
                ("max_capacity", models.PositiveIntegerField(default=4)),
                ("is_active", models.BooleanField(default=True)),
                ("is_staff", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "User",
                "verbose_name_plural": "Users",
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("current_groups__lte", models.F("max_capacity"))),
                        name="user_groups_within_capacity",
                    ),
                ],
            },
        ),
    ]
