from django.contrib import admin
from .models import Logbook


@admin.register(Logbook)
class LogbookAdmin(admin.ModelAdmin):
    list_display = ['student_name', 'week_no', 'project_title', 'supervisor_name', 'status', 'locked', 'submitted_at']
    list_filter = ['status', 'locked']
    search_fields = ['student_name', 'student_number', 'project_title', 'supervisor_name']
    readonly_fields = ['digital_approval', 'reviewed_at', 'submitted_at']
