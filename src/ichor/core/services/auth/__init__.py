from .auth import (
    ACTION_CREATE,
    ACTION_DELETE,
    ACTION_READ,
    ACTION_UPDATE,
    ROLE_ADMIN,
    ROLE_USER,
    RULE_ADMIN_ONLY,
    RULE_ADMIN_OR_SUBJECT,
    RULE_ANY,
    RULE_USER_ONLY,
    Auth,
    AuthError,
    AuthorizationError,
    Claims,
)
from .password import hash_password, verify_password

__all__ = [
    "ACTION_CREATE",
    "ACTION_DELETE",
    "ACTION_READ",
    "ACTION_UPDATE",
    "ROLE_ADMIN",
    "ROLE_USER",
    "RULE_ADMIN_ONLY",
    "RULE_ADMIN_OR_SUBJECT",
    "RULE_ANY",
    "RULE_USER_ONLY",
    "Auth",
    "AuthError",
    "AuthorizationError",
    "Claims",
    "hash_password",
    "verify_password",
]
