# backend/users/tokens.py
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken


class SessionToken(AccessToken):
    """
    Signed 7-day bearer credential.
    Carries the user id under ``uid`` plus the caller's email and role,
    so requests can be authorised without a database lookup.
    """

    @classmethod
    def for_user(cls, user):
        token = super().for_user(user)
        token["email"] = user.email
        token["role"] = user.role
        return token


def issue_token(user) -> str:
    return str(SessionToken.for_user(user))


def read_session(raw_token) -> dict:
    """Verify a bearer token and return the ``{id, email, role}`` it was issued for."""
    try:
        token = SessionToken(raw_token)
    except TokenError:
        raise AuthenticationFailed("Invalid or expired token. Please sign in again.")

    try:
        return {
            "id": int(token["uid"]),
            "email": token["email"],
            "role": token["role"],
        }
    except (KeyError, TypeError, ValueError):
        raise AuthenticationFailed("Token is missing required claims.")
