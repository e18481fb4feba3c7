"""Admin CLI against a throwaway SQLite file."""

import pytest
from typer.testing import CliRunner

from src.ichor.cli import app
from src.ichor.cli.db_commands import LINE_ITEM_STATUSES, REFERENCE_CURRENCIES
from src.ichor.core.services.auth import Auth
from src.ichor.runtime.config.config_data import ConfigData, DatabaseConfig
from src.ichor.runtime.context import get_config, with_context

runner = CliRunner()


@pytest.fixture
def cli_database(tmp_path):
    config = ConfigData(database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'cli.db'}"))
    with with_context(config):
        yield


@pytest.fixture
def seeded(cli_database):
    assert runner.invoke(app, ["migrate"]).exit_code == 0
    result = runner.invoke(
        app, ["seed", "--admin-email", "ops@example.com", "--admin-password", "ops-password"]
    )
    assert result.exit_code == 0, result.output
    return result


class TestAdminCli:
    def test_seed_loads_reference_data(self, seeded):
        assert (
            f"Seeded {len(REFERENCE_CURRENCIES)} currencies and "
            f"{len(LINE_ITEM_STATUSES)} line item statuses"
        ) in seeded.output

    def test_seed_is_idempotent(self, seeded):
        again = runner.invoke(
            app,
            ["seed", "--admin-email", "ops@example.com", "--admin-password", "ops-password"],
        )
        assert again.exit_code == 0
        assert "already exists" in again.output
        assert "Seeded 0 currencies and 0 line item statuses" in again.output

    def test_users_list(self, seeded):
        result = runner.invoke(app, ["users", "list"])
        assert result.exit_code == 0
        assert "Showing 1 of 1 users" in result.output

    def test_users_list_filter_without_match(self, seeded):
        result = runner.invoke(app, ["users", "list", "--email", "nobody"])
        assert result.exit_code == 0
        assert "No users found" in result.output

    def test_gentoken(self, seeded):
        result = runner.invoke(app, ["gentoken", "ops@example.com", "--ttl", "60"])

        assert result.exit_code == 0
        token = result.output.strip()
        claims = Auth(get_config().auth).authenticate(f"Bearer {token}")
        assert "ADMIN" in claims.roles

    def test_gentoken_unknown_user(self, seeded):
        result = runner.invoke(app, ["gentoken", "ghost@example.com"])
        assert result.exit_code == 1
