# backend/users/authentication.py
from rest_framework_simplejwt.authentication import JWTAuthentication

from .tokens import read_session


class SessionUser:
    """Request principal built from token claims alone."""

    is_authenticated = True
    is_anonymous = False
    is_active = True

    def __init__(self, id, email, role):
        self.id = id
        self.pk = id
        self.email = email
        self.role = role

    def __str__(self):
        return f"{self.email} ({self.role})"

    def __eq__(self, other):
        return getattr(other, "pk", None) == self.pk


class SessionTokenAuthentication(JWTAuthentication):
    """
    Bearer authentication that trusts the signed claims and skips the user table.
    A missing header leaves the request anonymous; a bad token is a 401.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None

        raw_token = self.get_raw_token(header)
        if raw_token is None:
            return None

        session = read_session(raw_token)
        return SessionUser(**session), raw_token
