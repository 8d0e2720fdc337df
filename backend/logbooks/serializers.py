# backend/logbooks/serializers.py
from rest_framework import serializers

from .models import Logbook, LogbookStatus


class LogbookSerializer(serializers.ModelSerializer):
    proposalId = serializers.IntegerField(source='proposal_id')
    studentId = serializers.IntegerField(source='student_id')
    studentName = serializers.CharField(source='student_name')
    studentNumber = serializers.CharField(source='student_number')
    supervisorId = serializers.IntegerField(source='supervisor_id', allow_null=True)
    supervisorName = serializers.CharField(source='supervisor_name')
    projectTitle = serializers.CharField(source='project_title')
    weekNo = serializers.IntegerField(source='week_no')
    meetingNo = serializers.IntegerField(source='meeting_no', allow_null=True)
    dateRange = serializers.CharField(source='date_range')
    workDone = serializers.JSONField(source='work_done')
    recordOfDiscussion = serializers.JSONField(source='record_of_discussion')
    problemsEncountered = serializers.JSONField(source='problems_encountered')
    furtherNotes = serializers.CharField(source='further_notes')
    digitalApproval = serializers.JSONField(source='digital_approval', allow_null=True)
    supervisorFeedback = serializers.CharField(source='supervisor_feedback', allow_null=True)
    rejectedBy = serializers.CharField(source='rejected_by', allow_null=True)
    reviewedAt = serializers.DateTimeField(source='reviewed_at', allow_null=True)
    submittedAt = serializers.DateTimeField(source='submitted_at')

    class Meta:
        model = Logbook
        fields = [
            'id', 'proposalId', 'studentId', 'studentName', 'studentNumber',
            'supervisorId', 'supervisorName', 'projectTitle', 'weekNo', 'meetingNo',
            'term', 'dateRange', 'workDone', 'recordOfDiscussion', 'problemsEncountered',
            'furtherNotes', 'status', 'locked', 'digitalApproval', 'supervisorFeedback',
            'rejectedBy', 'reviewedAt', 'submittedAt',
        ]
        read_only_fields = fields


def _items():
    return serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False, default=list,
    )


class LogbookCreateSerializer(serializers.Serializer):
    weekNo = serializers.IntegerField()
    meetingNo = serializers.IntegerField(required=False, allow_null=True, min_value=1, default=None)
    term = serializers.CharField(required=False, allow_blank=True, default='')
    dateRange = serializers.CharField(required=False, allow_blank=True, default='')
    workDone = _items()
    recordOfDiscussion = _items()
    problemsEncountered = _items()
    furtherNotes = serializers.CharField(required=False, allow_blank=True, default='')


class LogbookPatchSerializer(serializers.Serializer):
    """
    Either a supervisor review or a student content edit, never both.
    Unknown keys are a 400.
    """
    REVIEW_KEYS = ('status', 'supervisorFeedback', 'feedback')
    CONTENT_KEYS = {
        'workDone': 'work_done',
        'recordOfDiscussion': 'record_of_discussion',
        'problemsEncountered': 'problems_encountered',
        'furtherNotes': 'further_notes',
        'meetingNo': 'meeting_no',
        'term': 'term',
    }

    status = serializers.ChoiceField(choices=[LogbookStatus.APPROVED, LogbookStatus.REJECTED], required=False)
    supervisorFeedback = serializers.CharField(required=False, allow_blank=True)
    feedback = serializers.CharField(required=False, allow_blank=True)
    workDone = serializers.ListField(child=serializers.CharField(allow_blank=True), required=False)
    recordOfDiscussion = serializers.ListField(child=serializers.CharField(allow_blank=True), required=False)
    problemsEncountered = serializers.ListField(child=serializers.CharField(allow_blank=True), required=False)
    furtherNotes = serializers.CharField(required=False, allow_blank=True)
    meetingNo = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    term = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        keys = set(self.initial_data or {})
        if not keys:
            raise serializers.ValidationError("No fields to update.")
        unknown = sorted(keys - set(self.REVIEW_KEYS) - set(self.CONTENT_KEYS))
        if unknown:
            raise serializers.ValidationError(f"Field(s) cannot be updated: {', '.join(unknown)}.")
        review = keys & set(self.REVIEW_KEYS)
        content = keys & set(self.CONTENT_KEYS)
        if review and content:
            raise serializers.ValidationError("A review and a content edit cannot be sent together.")
        if review and 'status' not in attrs:
            raise serializers.ValidationError("status is required.")
        return attrs

    @property
    def is_review(self):
        return 'status' in self.validated_data

    @property
    def feedback_text(self):
        return self.validated_data.get('feedback') or self.validated_data.get('supervisorFeedback')

    @property
    def content_changes(self):
        return {
            model_field: self.validated_data[key]
            for key, model_field in self.CONTENT_KEYS.items()
            if key in self.validated_data
        }
