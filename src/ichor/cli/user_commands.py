"""User inspection commands."""

import typer
from rich.console import Console
from rich.table import Table

from src.ichor.core.sdk.order import OrderBy
from src.ichor.core.sdk.page import Page
from src.ichor.core.services.database.db_session import DbSessionService
from src.ichor.entities.core.user import UserFilter, UserRepository, UserService
from src.ichor.entities.core.user import entity as user_entity

console = Console()

users_app = typer.Typer(help="Inspect user accounts")


@users_app.command("list")
def list_users(
    limit: int = typer.Option(100, "--limit", "-l", help="Maximum number of users to show"),
    email: str = typer.Option(None, "--email", "-e", help="Filter by email substring"),
) -> None:
    """List user accounts ordered by username."""
    database = DbSessionService()
    with database.get_session() as session:
        users = UserService(UserRepository(session))
        flt = UserFilter(email=email)
        found = users.query(
            flt,
            OrderBy.new(user_entity.ORDER_BY_USERNAME),
            Page.must(1, limit),
        )
        total = users.count(flt)

    if not found:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Users")
    table.add_column("ID", style="cyan")
    table.add_column("Username", style="green")
    table.add_column("Email", style="blue")
    table.add_column("Name", style="magenta")
    table.add_column("Roles", style="yellow")
    table.add_column("Enabled")

    for user in found:
        table.add_row(
            str(user.id),
            user.username,
            user.email,
            user.full_name,
            ", ".join(user.roles),
            "✅" if user.enabled else "❌",
        )

    console.print(table)
    console.print(f"\n[green]Showing {len(found)} of {total} users[/green]")
