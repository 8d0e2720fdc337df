"""
Factory classes for generating test data using Factory Boy and Faker.
"""
import factory
from factory.django import DjangoModelFactory
from factory.fuzzy import FuzzyChoice
from django.contrib.auth import get_user_model
from users.models import Role

User = get_user_model()

DEFAULT_PASSWORD = 'Secret123'

RESEARCH_AREAS = [
    'Web Development', 'Mobile App Development', 'Machine Learning',
    'Database Systems', 'Cyber Security', 'Cloud Computing', 'IoT',
]


class UserFactory(DjangoModelFactory):
    """Factory for creating User instances."""

    class Meta:
        model = User
        django_get_or_create = ('email',)

    email = factory.Sequence(lambda n: f"user{n}@wil.ac.za")
    full_name = factory.Faker('name')
    role = Role.STUDENT
    is_active = True
    is_staff = False

    @factory.post_generation
    def password(self, create, extracted, **kwargs):
        """Set password for the user."""
        if not create:
            return
        password = extracted or DEFAULT_PASSWORD
        self.set_password(password)
        self.save()


class StudentFactory(UserFactory):
    """Student with a program and student number."""
    email = factory.Sequence(lambda n: f"student{n}@student.wil.ac.za")
    role = Role.STUDENT
    id_number = factory.Sequence(lambda n: f"2210{n:05d}")
    program = 'Diploma in Information Technology'


class SupervisorFactory(UserFactory):
    """Supervisor with expertise and free capacity."""
    email = factory.Sequence(lambda n: f"supervisor{n}@wil.ac.za")
    role = Role.SUPERVISOR
    employee_number = factory.Sequence(lambda n: f"EMP{n:04d}")
    faculty = 'Computing and Informatics'
    research_areas = factory.LazyFunction(lambda: [FuzzyChoice(RESEARCH_AREAS).fuzz()])
    current_groups = 0
    max_capacity = 4


class CoordinatorFactory(UserFactory):
    """WIL coordinator."""
    email = factory.Sequence(lambda n: f"coordinator{n}@wil.ac.za")
    role = Role.COORDINATOR
    employee_number = factory.Sequence(lambda n: f"COORD{n:03d}")


def auth_header(user):
    """Authorization header kwargs for an APIClient acting as ``user``."""
    from users.tokens import issue_token
    return {'HTTP_AUTHORIZATION': f"Bearer {issue_token(user)}"}
