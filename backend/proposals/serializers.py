# backend/proposals/serializers.py
from rest_framework import serializers

from users.serializers import MatchedSupervisorSerializer
from .models import Proposal, ProposalStatus


class ProposalSerializer(serializers.ModelSerializer):
    """Proposal (read), camelCase like the rest of the API."""
    researchArea = serializers.CharField(source='research_area')
    groupMembers = serializers.CharField(source='group_members')
    submittedBy = serializers.IntegerField(source='submitted_by_id')
    supervisorId = serializers.IntegerField(source='supervisor_id', allow_null=True)
    supervisorName = serializers.CharField(source='supervisor_name')
    similarityScore = serializers.IntegerField(source='similarity_score')
    forwardedToCoordinator = serializers.BooleanField(source='forwarded_to_coordinator')
    supervisorApproval = serializers.JSONField(source='supervisor_approval', allow_null=True)
    supervisorFeedback = serializers.CharField(source='supervisor_feedback', allow_null=True)
    coordinatorFeedback = serializers.CharField(source='coordinator_feedback', allow_null=True)
    coordinatorApprovedAt = serializers.DateTimeField(source='coordinator_approved_at', allow_null=True)
    coordinatorApprovedBy = serializers.CharField(source='coordinator_approved_by', allow_null=True)
    rejectedBy = serializers.CharField(source='rejected_by', allow_null=True)
    reviewedAt = serializers.DateTimeField(source='reviewed_at', allow_null=True)
    submittedAt = serializers.DateTimeField(source='submitted_at')

    class Meta:
        model = Proposal
        fields = [
            'id', 'title', 'description', 'researchArea', 'groupMembers',
            'submittedBy', 'supervisorId', 'supervisorName', 'similarityScore',
            'steps', 'status', 'forwardedToCoordinator', 'supervisorApproval',
            'supervisorFeedback', 'coordinatorFeedback', 'coordinatorApprovedAt',
            'coordinatorApprovedBy', 'rejectedBy', 'reviewedAt', 'submittedAt',
        ]
        read_only_fields = fields


class ProposalWithStudentSerializer(ProposalSerializer):
    studentName = serializers.CharField(source='submitted_by.full_name', default='')
    studentEmail = serializers.CharField(source='submitted_by.email', default='')
    studentIdNumber = serializers.CharField(source='submitted_by.id_number', default='')
    studentProgram = serializers.CharField(source='submitted_by.program', default='')

    class Meta(ProposalSerializer.Meta):
        fields = ProposalSerializer.Meta.fields + [
            'studentName', 'studentEmail', 'studentIdNumber', 'studentProgram',
        ]
        read_only_fields = fields


class ProposalCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=300)
    description = serializers.CharField()
    researchArea = serializers.CharField(max_length=100)
    groupMembers = serializers.CharField(required=False, allow_blank=True, default='')
    supervisorId = serializers.IntegerField(required=False, allow_null=True, default=None)


class ProposalCheckSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=300)
    researchArea = serializers.CharField(max_length=100)


class SimilaritySerializer(serializers.Serializer):
    percentage = serializers.IntegerField()
    isDuplicate = serializers.BooleanField(source='is_duplicate')
    message = serializers.CharField()


class ProposalCheckResultSerializer(serializers.Serializer):
    similarity = SimilaritySerializer()
    matches = MatchedSupervisorSerializer(many=True)


class ProposalPatchSerializer(serializers.Serializer):
    """
    Review patch. Only these keys are accepted; anything else is a 400
    rather than being ignored. The server stamps reviewers and times itself.
    """
    ALLOWED_KEYS = ('status', 'supervisorFeedback', 'coordinatorFeedback', 'feedback')

    status = serializers.ChoiceField(
        choices=[ProposalStatus.APPROVED, ProposalStatus.REJECTED, ProposalStatus.ACTIVATED],
        required=False,
    )
    supervisorFeedback = serializers.CharField(required=False, allow_blank=True)
    coordinatorFeedback = serializers.CharField(required=False, allow_blank=True)
    feedback = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if not self.initial_data:
            raise serializers.ValidationError("No fields to update.")
        unknown = sorted(set(self.initial_data) - set(self.ALLOWED_KEYS))
        if unknown:
            raise serializers.ValidationError(f"Field(s) cannot be updated: {', '.join(unknown)}.")
        if 'status' not in attrs:
            raise serializers.ValidationError("status is required.")
        return attrs

    @property
    def feedback_text(self):
        data = self.validated_data
        return data.get('feedback') or data.get('supervisorFeedback') or data.get('coordinatorFeedback')
