#backend/users/serializers.py
import re

from rest_framework import serializers

from .models import User, Role


class UserSerializer(serializers.ModelSerializer):
    """Public shape of an account (read)."""
    uid = serializers.IntegerField(source='id', read_only=True)
    fullName = serializers.CharField(source='full_name', read_only=True)
    name = serializers.CharField(source='full_name', read_only=True)
    idNumber = serializers.CharField(source='id_number', read_only=True)
    employeeNumber = serializers.CharField(source='employee_number', read_only=True)
    researchAreas = serializers.JSONField(source='research_areas', read_only=True)
    currentGroups = serializers.IntegerField(source='current_groups', read_only=True)
    maxCapacity = serializers.IntegerField(source='max_capacity', read_only=True)

    class Meta:
        model = User
        fields = [
            'uid', 'id', 'role', 'fullName', 'name', 'email',
            'idNumber', 'employeeNumber', 'program', 'faculty',
            'researchAreas', 'currentGroups', 'maxCapacity',
        ]
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """
    Self-registration for any of the three roles.
    Students must name a program; staff must give an employee number.
    Email uniqueness is enforced by the manager (409), not here (400).
    """
    role = serializers.ChoiceField(choices=Role.choices)
    fullName = serializers.CharField(max_length=200)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    idNumber = serializers.CharField(required=False, allow_blank=True, default="")
    employeeNumber = serializers.CharField(required=False, allow_blank=True, default="")
    program = serializers.CharField(required=False, allow_blank=True, default="")
    faculty = serializers.CharField(required=False, allow_blank=True, default="")
    researchAreas = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False, default=list
    )

    def validate_fullName(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Full name is required.")
        return value

    def validate_email(self, value):
        return value.strip().lower()

    def validate_password(self, value):
        if len(value) < 8:
            raise serializers.ValidationError("Password must be at least 8 characters.")
        if not re.search(r"[A-Z]", value):
            raise serializers.ValidationError("Password must contain an uppercase letter.")
        if not re.search(r"[0-9]", value):
            raise serializers.ValidationError("Password must contain a number.")
        return value

    def validate(self, attrs):
        role = attrs.get('role')
        if role == Role.STUDENT and not attrs.get('program', '').strip():
            raise serializers.ValidationError({"program": "Program is required for students."})
        if role in (Role.SUPERVISOR, Role.COORDINATOR) and not attrs.get('employeeNumber', '').strip():
            raise serializers.ValidationError({"employeeNumber": "Employee number is required for staff."})
        return attrs

    def create(self, validated_data):
        return User.objects.register_user(
            email=validated_data['email'],
            password=validated_data['password'],
            role=validated_data['role'],
            full_name=validated_data['fullName'],
            id_number=validated_data.get('idNumber', '').strip(),
            employee_number=validated_data.get('employeeNumber', '').strip(),
            program=validated_data.get('program', '').strip(),
            faculty=validated_data.get('faculty', '').strip(),
            research_areas=[a.strip() for a in validated_data.get('researchAreas', []) if a.strip()],
        )


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(help_text="Account email")
    password = serializers.CharField(write_only=True, help_text="Account password")


class SessionResponseSerializer(serializers.Serializer):
    """Serializer for register/login responses."""
    success = serializers.BooleanField()
    token = serializers.CharField(help_text="7-day bearer token")
    user = UserSerializer()


class MatchedSupervisorSerializer(UserSerializer):
    """Supervisor row with the ranking score attached by the matcher."""
    calculatedMatch = serializers.IntegerField(source='calculated_match', read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ['calculatedMatch']
        read_only_fields = fields
