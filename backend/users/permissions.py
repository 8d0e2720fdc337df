# backend/users/permissions.py
from rest_framework.permissions import BasePermission

from .models import Role


# Role is read from the token claims; no DB hit.
def role_name(user):
    return getattr(user, "role", None) if user and user.is_authenticated else None


class IsAuthenticatedAndHasRole(BasePermission):
    required_roles = ()  # override per subclass
    message = "Your role is not allowed to perform this action."

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        rn = role_name(request.user)
        return rn in self.required_roles if self.required_roles else True


# ---- Three-role gates --------------------------------------------------------

class IsStudentRole(IsAuthenticatedAndHasRole):
    required_roles = (Role.STUDENT,)
    message = "Only students can perform this action."


class IsSupervisorRole(IsAuthenticatedAndHasRole):
    required_roles = (Role.SUPERVISOR,)
    message = "Only supervisors can perform this action."


class IsCoordinatorRole(IsAuthenticatedAndHasRole):
    required_roles = (Role.COORDINATOR,)
    message = "Only the WIL coordinator can perform this action."


class IsSupervisorOrCoordinator(IsAuthenticatedAndHasRole):
    required_roles = (Role.SUPERVISOR, Role.COORDINATOR)
    message = "Only supervisors or the coordinator can perform this action."


# ---- Request-method split ----------------------------------------------------

class CoordinatorWritesOnly(BasePermission):
    """
    Any signed-in user may read; only the coordinator may write.
    """
    message = IsCoordinatorRole.message

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        if request.method in ("GET", "HEAD", "OPTIONS"):
            return True
        return role_name(request.user) == Role.COORDINATOR


class StudentCreatesOnly(BasePermission):
    """
    POST is reserved for students; other methods only need a session.
    """
    message = IsStudentRole.message

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        if request.method == "POST":
            return role_name(request.user) == Role.STUDENT
        return True
