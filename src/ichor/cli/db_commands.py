"""Schema, seed data and token commands."""

import typer
from rich.console import Console
from sqlmodel import Session

from src.ichor.core.sdk.errors import NotFoundError
from src.ichor.core.services.auth import ROLE_ADMIN, ROLE_USER, Auth
from src.ichor.core.services.database.db_manage import DbManageService
from src.ichor.core.services.database.db_session import DbSessionService
from src.ichor.entities.core.currency import (
    CurrencyRepository,
    CurrencyService,
    NewCurrency,
)
from src.ichor.entities.core.user import NewUser, UserRepository, UserService
from src.ichor.entities.procurement.po_line_item_status import (
    NewPurchaseOrderLineItemStatus,
    PurchaseOrderLineItemStatusRepository,
    PurchaseOrderLineItemStatusService,
)
from src.ichor.runtime.context import get_config

console = Console()

REFERENCE_CURRENCIES = [
    ("USD", "US Dollar", "$", "en-US", 2),
    ("EUR", "Euro", "€", "de-DE", 2),
    ("GBP", "British Pound", "£", "en-GB", 2),
    ("JPY", "Japanese Yen", "¥", "ja-JP", 0),
    ("CAD", "Canadian Dollar", "$", "en-CA", 2),
    ("MXN", "Mexican Peso", "$", "es-MX", 2),
]

LINE_ITEM_STATUSES = [
    ("PENDING", "Awaiting supplier confirmation"),
    ("ORDERED", "Confirmed by the supplier"),
    ("PARTIALLY_RECEIVED", "Some units received"),
    ("RECEIVED", "All units received"),
    ("BACKORDERED", "Supplier is out of stock"),
    ("CANCELLED", "No longer expected"),
]


def migrate(
    reset: bool = typer.Option(
        False, "--reset", help="Drop every table before creating the schema"
    ),
) -> None:
    """Create every database table."""
    manager = DbManageService()
    if reset:
        if not typer.confirm("This deletes all data. Continue?"):
            raise typer.Exit(code=1)
        manager.drop_all()
    manager.create_all()
    console.print("[green]✅ Database schema is up to date[/green]")


def _seed_admin(session: Session, email: str, password: str):
    users = UserService(UserRepository(session))
    try:
        admin = users.query_by_email(email)
        console.print(f"[yellow]Admin {email} already exists[/yellow]")
        return admin
    except NotFoundError:
        pass

    admin = users.create(
        NewUser(
            username="admin",
            first_name="Admin",
            last_name="User",
            email=email,
            roles=[ROLE_ADMIN, ROLE_USER],
            password=password,
        )
    )
    console.print(f"[green]Created admin user {admin.email}[/green]")
    return admin


def _exists(lookup, key: str) -> bool:
    try:
        lookup(key)
    except NotFoundError:
        return False
    return True


def _seed_currencies(session: Session, admin_id) -> int:
    currencies = CurrencyService(CurrencyRepository(session))
    created = 0
    for order, (code, name, symbol, locale, places) in enumerate(REFERENCE_CURRENCIES):
        if _exists(currencies.query_by_code, code):
            continue
        currencies.create(
            NewCurrency(
                code=code,
                name=name,
                symbol=symbol,
                locale=locale,
                decimal_places=places,
                sort_order=order,
                created_by=admin_id,
            )
        )
        created += 1
    return created


def _seed_statuses(session: Session) -> int:
    statuses = PurchaseOrderLineItemStatusService(
        PurchaseOrderLineItemStatusRepository(session)
    )
    created = 0
    for order, (name, description) in enumerate(LINE_ITEM_STATUSES):
        if _exists(statuses.query_by_name, name):
            continue
        statuses.create(
            NewPurchaseOrderLineItemStatus(
                name=name, description=description, sort_order=order
            )
        )
        created += 1
    return created


def seed(
    admin_email: str = typer.Option(
        "admin@example.com", "--admin-email", help="Email of the admin account"
    ),
    admin_password: str = typer.Option(
        ..., "--admin-password", prompt=True, hide_input=True, help="Admin password"
    ),
) -> None:
    """Load the admin account and reference data."""
    database = DbSessionService()
    try:
        with database.session_scope() as session:
            admin = _seed_admin(session, admin_email, admin_password)
            currencies = _seed_currencies(session, admin.id)
            statuses = _seed_statuses(session)
    except Exception as e:
        console.print(f"[red]❌ Seeding failed: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(
        f"[green]✅ Seeded {currencies} currencies and {statuses} line item statuses[/green]"
    )


def gentoken(
    email: str = typer.Argument(..., help="Email of the user to issue a token for"),
    ttl: int = typer.Option(None, "--ttl", help="Token lifetime in seconds"),
) -> None:
    """Print a signed bearer token for an existing user."""
    database = DbSessionService()
    with database.get_session() as session:
        try:
            user = UserService(UserRepository(session)).query_by_email(email)
        except NotFoundError as e:
            console.print(f"[red]❌ No user with email {email}[/red]")
            raise typer.Exit(code=1) from e

    token, _ = Auth(get_config().auth).generate_token(
        str(user.id), user.roles, expires_in_seconds=ttl
    )
    console.print(token, soft_wrap=True)
