import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Proposal",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=300)),
                ("description", models.TextField()),
                ("research_area", models.CharField(max_length=100)),
                ("group_members", models.TextField(blank=True, default="")),
                ("supervisor_name", models.CharField(blank=True, default="", max_length=200)),
                ("similarity_score", models.PositiveSmallIntegerField(default=0)),
                ("steps", models.JSONField(blank=True, default=list)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("approved", "Approved"), ("rejected", "Rejected"), ("activated", "Activated"), ("flagged", "Flagged")], db_index=True, default="pending", max_length=20)),
                ("forwarded_to_coordinator", models.BooleanField(default=False)),
                ("supervisor_approval", models.JSONField(blank=True, null=True)),
                ("supervisor_feedback", models.TextField(blank=True, null=True)),
                ("coordinator_feedback", models.TextField(blank=True, null=True)),
                ("coordinator_approved_at", models.DateTimeField(blank=True, null=True)),
                ("coordinator_approved_by", models.CharField(blank=True, max_length=200, null=True)),
                ("rejected_by", models.CharField(blank=True, max_length=200, null=True)),
                ("reviewed_at", models.DateTimeField(blank=True, null=True)),
                ("submitted_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("submitted_by", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="proposals", to=settings.AUTH_USER_MODEL)),
                ("supervisor", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="supervised_proposals", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-submitted_at", "-id"],
            },
        ),
    ]
