from sqlmodel import SQLModel

from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.core.user import entity as usr
from src.ichor.entities.core.user.entity import (
    User,
    UserFilter,
    UserNotFoundError,
    UserUniqueError,
)
from src.ichor.entities.core.user.table import UserTable


class UserRepository(SqlStore[User, UserFilter]):
    """Data-access layer for users."""

    table = UserTable
    entity = User
    not_found_error = UserNotFoundError
    unique_error = UserUniqueError
    default_order = usr.DEFAULT_ORDER_BY
    order_columns = {
        usr.ORDER_BY_ID: "id",
        usr.ORDER_BY_USERNAME: "username",
        usr.ORDER_BY_FIRST_NAME: "first_name",
        usr.ORDER_BY_LAST_NAME: "last_name",
        usr.ORDER_BY_EMAIL: "email",
        usr.ORDER_BY_ENABLED: "enabled",
        usr.ORDER_BY_DATE_HIRED: "date_hired",
        usr.ORDER_BY_CREATED_DATE: "created_date",
    }

    def to_row(self, entity: User) -> SQLModel:
        # password_hash is excluded from dumps so it never leaks into events
        return UserTable.model_validate(
            {**entity.model_dump(), "password_hash": entity.password_hash}
        )

    def _apply_filter(self, stmt, flt: UserFilter):
        if flt.id is not None:
            stmt = stmt.where(UserTable.id == flt.id)
        if flt.username:
            stmt = stmt.where(contains(UserTable.username, flt.username))
        if flt.first_name:
            stmt = stmt.where(contains(UserTable.first_name, flt.first_name))
        if flt.last_name:
            stmt = stmt.where(contains(UserTable.last_name, flt.last_name))
        if flt.email:
            stmt = stmt.where(contains(UserTable.email, flt.email))
        if flt.enabled is not None:
            stmt = stmt.where(UserTable.enabled == flt.enabled)
        if flt.office_id is not None:
            stmt = stmt.where(UserTable.office_id == flt.office_id)
        if flt.start_created_date is not None:
            stmt = stmt.where(UserTable.created_date >= flt.start_created_date)
        if flt.end_created_date is not None:
            stmt = stmt.where(UserTable.created_date <= flt.end_created_date)
        return stmt

    def query_by_email(self, email: str) -> User:
        return self._query_one(UserTable.email == email)

    def query_by_username(self, username: str) -> User:
        return self._query_one(UserTable.username == username)
