# backend/users/models.py
from django.contrib.auth import authenticate
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import IntegrityError, models, transaction
from django.db.models import F, Q
from django.utils import timezone
from rest_framework.exceptions import AuthenticationFailed, NotFound
import logging
from rich.console import Console
from rich.logging import RichHandler

from wil_monitor.exceptions import Conflict

# Configure rich logging
console = Console()
logger = logging.getLogger(__name__)

# Add Rich handler if not already configured
if not logger.handlers and not logging.getLogger().handlers:
    logger.addHandler(RichHandler(console=console))
    logger.setLevel(logging.INFO)

INVALID_CREDENTIALS = "Incorrect email or password. Please try again."
DEFAULT_MAX_CAPACITY = 4


class Role(models.TextChoices):
    STUDENT = 'student', 'Student'
    SUPERVISOR = 'supervisor', 'Supervisor'
    COORDINATOR = 'coordinator', 'Coordinator'


class UserManager(BaseUserManager):
    """Email-based user manager with registration and login helpers."""

    def create_user(self, email, password=None, role=Role.STUDENT, **extra_fields):
        if not email:
            raise ValueError("The email field must be set")
        email = self.normalize_email(email).strip().lower()
        extra_fields.setdefault('is_active', True)

        if role == Role.SUPERVISOR and 'max_capacity' not in extra_fields:
            extra_fields['max_capacity'] = self._default_capacity()

        user = self.model(email=email, role=role, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_active', True)
        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        return self.create_user(email, password, role=Role.COORDINATOR, **extra_fields)

    def register_user(self, email, password, role=Role.STUDENT, **extra_fields):
        """Create an account; the email must not be registered yet."""
        email = (email or "").strip().lower()
        if self.filter(email=email).exists():
            logger.warning("Registration refused, email already registered: %s", email)
            raise Conflict("email-already-in-use")
        try:
            with transaction.atomic():
                user = self.create_user(email=email, password=password, role=role, **extra_fields)
        except IntegrityError:
            # lost a race against a concurrent registration with the same email
            raise Conflict("email-already-in-use")
        logger.info("Registered %s %s (id=%s)", user.role, user.email, user.id)
        return user

    def login_user(self, email, password):
        """Return the user for a matching credential, else AuthenticationFailed."""
        user = authenticate(username=(email or "").strip().lower(), password=password)
        if user is None or not user.is_active:
            logger.warning("Failed login for %s", email)
            raise AuthenticationFailed(INVALID_CREDENTIALS)
        return user

    def for_request(self, request):
        """Load the full record of the authenticated caller."""
        try:
            return self.get(pk=request.user.id)
        except self.model.DoesNotExist:
            raise NotFound("User not found.")

    def supervisors(self):
        return self.filter(role=Role.SUPERVISOR, is_active=True).order_by('full_name')

    @staticmethod
    def _default_capacity():
        from system_settings.models import SystemSettings
        try:
            return SystemSettings.load().max_supervision_limit
        except Exception:
            logger.exception("Settings unavailable, using default supervision limit")
            return DEFAULT_MAX_CAPACITY


class User(AbstractBaseUser):
    """
    Custom User model with email as the unique identifier.
    One role per account; supervisors carry expertise and a capacity pair.
    """
    email           = models.EmailField(unique=True)
    full_name       = models.CharField(max_length=200)
    role            = models.CharField(max_length=20, choices=Role.choices, default=Role.STUDENT)
    id_number       = models.CharField(max_length=50, blank=True)
    employee_number = models.CharField(max_length=50, blank=True)
    program         = models.CharField(max_length=200, blank=True)
    faculty         = models.CharField(max_length=200, blank=True)
    research_areas  = models.JSONField(default=list, blank=True)
    current_groups  = models.PositiveIntegerField(default=0)
    max_capacity    = models.PositiveIntegerField(default=DEFAULT_MAX_CAPACITY)
    is_active       = models.BooleanField(default=True)
    is_staff        = models.BooleanField(default=False)
    created_at      = models.DateTimeField(default=timezone.now)
    updated_at      = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD  = 'email'
    EMAIL_FIELD     = 'email'
    REQUIRED_FIELDS = ['full_name']

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        constraints = [
            models.CheckConstraint(
                condition=Q(current_groups__lte=F('max_capacity')),
                name='user_groups_within_capacity',
            ),
        ]

    def __str__(self):
        return f"{self.full_name or self.email} ({self.role})"

    def get_full_name(self):
        return self.full_name or self.email

    def get_short_name(self):
        return (self.full_name.split(" ")[0] if self.full_name else "") or self.email

    # Required methods for Django admin compatibility without PermissionsMixin
    def has_perm(self, perm, obj=None):
        return self.is_staff

    def has_module_perms(self, app_label):
        return self.is_staff

    @property
    def is_student(self):
        return self.role == Role.STUDENT

    @property
    def is_supervisor(self):
        return self.role == Role.SUPERVISOR

    @property
    def is_coordinator(self):
        return self.role == Role.COORDINATOR

    @property
    def load_ratio(self):
        if not self.max_capacity:
            return 1.0
        return (self.current_groups or 0) / self.max_capacity

    def has_capacity(self):
        return (self.current_groups or 0) < (self.max_capacity or 0)

    def take_group(self):
        """
        Count one more supervised group, refusing to pass max_capacity.
        The guard is part of the UPDATE so concurrent activations cannot overshoot.
        """
        updated = (User.objects
                   .filter(pk=self.pk, current_groups__lt=F('max_capacity'))
                   .update(current_groups=F('current_groups') + 1))
        if not updated:
            raise Conflict(f"{self.get_full_name()} has reached the maximum supervision capacity.")
        self.refresh_from_db(fields=['current_groups'])
        return self.current_groups
