# backend/users/views.py
from rest_framework import status, generics
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiExample
import logging

from .models import User
from .serializers import (
    UserSerializer, RegisterSerializer, LoginSerializer, SessionResponseSerializer,
)
from .tokens import issue_token

logger = logging.getLogger(__name__)


def _session_payload(user):
    return {
        "success": True,
        "token": issue_token(user),
        "user": UserSerializer(user).data,
    }


class OpenSessionMixin:
    """Views reachable without a token that still answer 401 on bad credentials."""
    authentication_classes = []
    permission_classes = [AllowAny]

    def get_authenticate_header(self, request):
        return 'Bearer realm="api"'


class RegisterView(OpenSessionMixin, generics.CreateAPIView):
    serializer_class = RegisterSerializer

    @extend_schema(
        request=RegisterSerializer,
        responses={201: SessionResponseSerializer},
        description="Create an account and open a session. Duplicate email returns 409.",
        examples=[OpenApiExample('Register student', value={
            'role': 'student', 'fullName': 'Thabo Mokoena', 'email': 'thabo@student.ac.za',
            'password': 'Secret123', 'idNumber': '221004455', 'program': 'Diploma in IT',
        })],
    )
    def create(self, request, *args, **kwargs):
        s = self.get_serializer(data=request.data)
        s.is_valid(raise_exception=True)
        user = s.save()
        return Response(_session_payload(user), status=status.HTTP_201_CREATED)


class LoginView(OpenSessionMixin, generics.CreateAPIView):
    serializer_class = LoginSerializer

    @extend_schema(
        request=LoginSerializer,
        responses={200: SessionResponseSerializer},
        description="Exchange email and password for a bearer token.",
        examples=[OpenApiExample('Login', value={'email': 'thabo@student.ac.za', 'password': 'Secret123'})],
    )
    def create(self, request, *args, **kwargs):
        s = self.get_serializer(data=request.data)
        s.is_valid(raise_exception=True)
        user = User.objects.login_user(
            s.validated_data["email"],
            s.validated_data["password"],
        )
        logger.info("User %s signed in as %s", user.email, user.role)
        return Response(_session_payload(user), status=status.HTTP_200_OK)


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: UserSerializer},
        description="Current user's full record.",
    )
    def get(self, request):
        user = User.objects.for_request(request)
        return Response({"user": UserSerializer(user).data})


class SupervisorListView(generics.ListAPIView):
    """All active supervisors, ordered by name."""
    permission_classes = [IsAuthenticated]
    serializer_class = UserSerializer
    pagination_class = None

    def get_queryset(self):
        return User.objects.supervisors()
