from datetime import datetime
from typing import Any

from src.ichor.core.sdk.crud import CrudService, explicit_changes
from src.ichor.core.sdk.errors import AuthenticationError
from src.ichor.core.services.auth.password import hash_password, verify_password
from src.ichor.entities.core.user.entity import (
    DOMAIN_NAME,
    NewUser,
    UpdateUser,
    UpdateUserRole,
    User,
    UserFilter,
    UserNotFoundError,
)


class UserService(CrudService[User, NewUser, UpdateUser, UserFilter]):
    """Business API for users; owns password hashing."""

    domain = DOMAIN_NAME
    entity = User

    def _build(self, new: NewUser, now: datetime) -> User:
        data = new.model_dump(exclude={"password"})
        data["email"] = new.email.lower()
        return User(
            **data,
            password_hash=hash_password(new.password),
            created_date=now,
            updated_date=now,
        )

    def _changes(self, entity: User, upd: UpdateUser | UpdateUserRole) -> dict[str, Any]:
        if isinstance(upd, UpdateUserRole):
            return {"roles": list(upd.roles)}

        changes = explicit_changes(User, upd, exclude={"password"})
        if "email" in changes:
            changes["email"] = changes["email"].lower()
        if upd.password:
            changes["password_hash"] = hash_password(upd.password)
        return changes

    def update_roles(self, user: User, upd: UpdateUserRole) -> User:
        """Replace the roles of ``user``; profile updates never touch them."""
        return self.update(user, upd)

    def query_by_email(self, email: str) -> User:
        return self.storer.query_by_email(email.lower())

    def query_by_username(self, username: str) -> User:
        return self.storer.query_by_username(username)

    def authenticate(self, email: str, password: str) -> User:
        """Return the enabled user owning ``email`` if ``password`` matches."""
        try:
            user = self.query_by_email(email)
        except UserNotFoundError as e:
            raise AuthenticationError("authentication failed") from e

        if not user.enabled:
            raise AuthenticationError("user disabled")
        if not verify_password(password, user.password_hash):
            raise AuthenticationError("authentication failed")
        return user
