from django.core.management.base import BaseCommand, CommandError
from users.models import User, Role
from rich.console import Console


class Command(BaseCommand):
    help = 'Change the role of an existing account'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.console = Console()

    def add_arguments(self, parser):
        parser.add_argument('email', type=str, help='User email address')
        parser.add_argument('role', type=str, help=f"One of: {', '.join(Role.values)}")

    def handle(self, *args, **options):
        email = options['email'].strip().lower()
        role = options['role'].strip().lower()

        if role not in Role.values:
            raise CommandError(f'Role "{role}" does not exist. Available roles: {", ".join(Role.values)}')

        try:
            user = User.objects.get(email=email)
        except User.DoesNotExist:
            raise CommandError(f'User with email "{email}" does not exist')

        if user.role == role:
            self.console.print(f"[yellow]• User '{email}' already has role '{role}'[/yellow]")
            return

        previous = user.role
        user.role = role
        user.save(update_fields=['role', 'updated_at'])
        self.console.print(f"[green]✓ Changed role of '{email}' from '{previous}' to '{role}'[/green]")
        self.console.print("[cyan]Existing tokens keep the old role until the user signs in again.[/cyan]")
