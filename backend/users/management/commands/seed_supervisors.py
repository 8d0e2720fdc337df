"""
Django management command to seed demo supervisor accounts.
Usage: python manage.py seed_supervisors [--password Secret123]
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from users.models import User, Role
from rich.console import Console
from rich.table import Table
from rich.panel import Panel


SUPERVISORS = [
    {
        'email': 'n.dlamini@wil.ac.za',
        'full_name': 'Dr. Nomsa Dlamini',
        'employee_number': 'EMP1001',
        'faculty': 'Computing and Informatics',
        'research_areas': ['Web Development', 'E-Commerce', 'Cloud Computing'],
    },
    {
        'email': 'p.naidoo@wil.ac.za',
        'full_name': 'Prof. Priya Naidoo',
        'employee_number': 'EMP1002',
        'faculty': 'Computing and Informatics',
        'research_areas': ['Machine Learning', 'Artificial Intelligence', 'Data Mining'],
    },
    {
        'email': 'j.vanwyk@wil.ac.za',
        'full_name': 'Mr. Johan van Wyk',
        'employee_number': 'EMP1003',
        'faculty': 'Computing and Informatics',
        'research_areas': ['Mobile App Development', 'Android', 'iOS'],
    },
    {
        'email': 's.khumalo@wil.ac.za',
        'full_name': 'Dr. Sipho Khumalo',
        'employee_number': 'EMP1004',
        'faculty': 'Engineering',
        'research_areas': ['IoT', 'Embedded Systems', 'Smart Sensors'],
    },
    {
        'email': 'l.botha@wil.ac.za',
        'full_name': 'Ms. Lerato Botha',
        'employee_number': 'EMP1005',
        'faculty': 'Computing and Informatics',
        'research_areas': ['Cyber Security', 'Blockchain', 'Digital Forensics'],
    },
]


class Command(BaseCommand):
    help = 'Seed demo supervisor accounts with research areas'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.console = Console()

    def add_arguments(self, parser):
        parser.add_argument('--password', default='Supervisor123',
                            help='Password given to newly created supervisors')

    def handle(self, *args, **options):
        """Main command handler."""
        self.console.print(Panel.fit("[bold blue]Supervisor Seed Command[/bold blue]",
                                     subtitle="Loading supervisor accounts into database"))

        created, updated = [], []

        try:
            with transaction.atomic():
                for data in SUPERVISORS:
                    user = User.objects.filter(email=data['email']).first()
                    if user is None:
                        user = User.objects.create_user(
                            email=data['email'],
                            password=options['password'],
                            role=Role.SUPERVISOR,
                            full_name=data['full_name'],
                            employee_number=data['employee_number'],
                            faculty=data['faculty'],
                            research_areas=data['research_areas'],
                        )
                        created.append(user.email)
                        self.console.print(f"[green]✓ Created supervisor:[/green] {user.full_name}")
                    elif user.research_areas != data['research_areas']:
                        user.research_areas = data['research_areas']
                        user.save(update_fields=['research_areas', 'updated_at'])
                        updated.append(user.email)
                        self.console.print(f"[yellow]⚠ Updated research areas:[/yellow] {user.full_name}")
                    else:
                        self.console.print(f"[blue]ℹ Supervisor already exists:[/blue] {user.full_name}")

            table = Table(title="Supervisor Seed Results")
            table.add_column("Email", style="cyan", no_wrap=True)
            table.add_column("Name", style="magenta")
            table.add_column("Research Areas", style="white")
            table.add_column("Load", style="white")
            table.add_column("Status", style="green")

            for user in User.objects.supervisors():
                if user.email in created:
                    status = "[green]Created[/green]"
                elif user.email in updated:
                    status = "[yellow]Updated[/yellow]"
                else:
                    status = "[blue]Exists[/blue]"
                table.add_row(
                    user.email,
                    user.full_name,
                    ", ".join(user.research_areas or []),
                    f"{user.current_groups}/{user.max_capacity}",
                    status,
                )

            self.console.print(table)
            self.stdout.write(
                self.style.SUCCESS(
                    f'Seeded {len(created)} new supervisors, updated {len(updated)}.'
                )
            )

        except Exception as e:
            self.console.print(f"[bold red]✗ Error seeding supervisors:[/bold red] {str(e)}")
            raise
