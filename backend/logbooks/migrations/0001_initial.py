import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("proposals", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Logbook",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("student_name", models.CharField(max_length=200)),
                ("student_number", models.CharField(blank=True, default="", max_length=50)),
                ("supervisor_name", models.CharField(blank=True, default="", max_length=200)),
                ("project_title", models.CharField(max_length=300)),
                ("week_no", models.PositiveSmallIntegerField()),
                ("meeting_no", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("term", models.CharField(blank=True, default="", max_length=50)),
                ("date_range", models.CharField(blank=True, default="", max_length=50)),
                ("work_done", models.JSONField(blank=True, default=list)),
                ("record_of_discussion", models.JSONField(blank=True, default=list)),
                ("problems_encountered", models.JSONField(blank=True, default=list)),
                ("further_notes", models.TextField(blank=True, default="")),
                ("status", models.CharField(choices=[("pending", "Pending"), ("approved", "Approved"), ("rejected", "Rejected")], db_index=True, default="pending", max_length=20)),
                ("locked", models.BooleanField(default=False)),
                ("digital_approval", models.JSONField(blank=True, null=True)),
                ("supervisor_feedback", models.TextField(blank=True, null=True)),
                ("rejected_by", models.CharField(blank=True, max_length=200, null=True)),
                ("reviewed_at", models.DateTimeField(blank=True, null=True)),
                ("submitted_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("proposal", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="logbooks", to="proposals.proposal")),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="logbooks", to=settings.AUTH_USER_MODEL)),
                ("supervisor", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="supervised_logbooks", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-submitted_at", "-id"],
                "constraints": [
                    models.UniqueConstraint(fields=("student", "week_no"), name="logbook_one_per_student_week"),
                ],
            },
        ),
    ]
