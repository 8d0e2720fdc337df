from django.contrib import admin
from .models import Proposal


@admin.register(Proposal)
class ProposalAdmin(admin.ModelAdmin):
    list_display = ['title', 'submitted_by', 'supervisor_name', 'status', 'similarity_score', 'submitted_at']
    list_filter = ['status', 'research_area', 'forwarded_to_coordinator']
    search_fields = ['title', 'submitted_by__email', 'submitted_by__full_name', 'supervisor_name']
    list_select_related = ['submitted_by']
    readonly_fields = ['steps', 'supervisor_approval', 'similarity_score', 'submitted_at', 'reviewed_at']
