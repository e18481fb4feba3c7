"""Administrative command line for ichor."""

import typer

from .db_commands import gentoken, migrate, seed
from .user_commands import users_app

app = typer.Typer(
    help="ichor administration: schema, seed data, tokens and users",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("migrate")(migrate)
app.command("seed")(seed)
app.command("gentoken")(gentoken)
app.add_typer(users_app, name="users")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
