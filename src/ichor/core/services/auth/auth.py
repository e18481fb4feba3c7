"""Token issuing, authentication and authorization.

Tokens are compact JWTs signed with a shared secret selected by the ``kid``
header. Authorization evaluates a route rule against the caller's roles and
then consults the per-role table permissions from configuration.
"""

from __future__ import annotations

import base64
import json
import time
import uuid
from collections.abc import Callable

from authlib.jose import JoseError, jwt
from loguru import logger
from pydantic import BaseModel, Field

from src.ichor.runtime.config.config_data import AuthConfig

ROLE_ADMIN = "ADMIN"
ROLE_USER = "USER"

ACTION_CREATE = "CREATE"
ACTION_READ = "READ"
ACTION_UPDATE = "UPDATE"
ACTION_DELETE = "DELETE"

RULE_ANY = "rule_any"
RULE_ADMIN_ONLY = "rule_admin_only"
RULE_USER_ONLY = "rule_user_only"
RULE_ADMIN_OR_SUBJECT = "rule_admin_or_subject"


class AuthError(Exception):
    """The request could not be authenticated."""


class AuthorizationError(Exception):
    """The authenticated caller may not perform the requested action."""


class Claims(BaseModel):
    sub: str
    roles: list[str] = Field(default_factory=list)
    iss: str | None = None
    exp: int | None = None
    iat: int | None = None

    def has_role(self, role: str) -> bool:
        return role in self.roles

    @property
    def user_id(self) -> uuid.UUID | None:
        try:
            return uuid.UUID(self.sub)
        except ValueError:
            return None


def _rule_any(claims: Claims, user_id: str | None) -> bool:
    return True


def _rule_admin_only(claims: Claims, user_id: str | None) -> bool:
    return claims.has_role(ROLE_ADMIN)


def _rule_user_only(claims: Claims, user_id: str | None) -> bool:
    return claims.has_role(ROLE_USER)


def _rule_admin_or_subject(claims: Claims, user_id: str | None) -> bool:
    if claims.has_role(ROLE_ADMIN):
        return True
    return claims.has_role(ROLE_USER) and user_id is not None and claims.sub == user_id


_RULES: dict[str, Callable[[Claims, str | None], bool]] = {
    RULE_ANY: _rule_any,
    RULE_ADMIN_ONLY: _rule_admin_only,
    RULE_USER_ONLY: _rule_user_only,
    RULE_ADMIN_OR_SUBJECT: _rule_admin_or_subject,
}


def _unverified_header(token: str) -> dict:
    segment = token.split(".", 1)[0]
    raw = base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))
    header = json.loads(raw)
    if not isinstance(header, dict):
        raise ValueError("malformed token header")
    return header


class Auth:
    def __init__(
        self,
        config: AuthConfig,
        user_enabled: Callable[[uuid.UUID], bool] | None = None,
    ) -> None:
        self._config = config
        self._user_enabled = user_enabled

    @property
    def issuer(self) -> str:
        return self._config.issuer

    def generate_token(
        self,
        subject: str,
        roles: list[str],
        kid: str | None = None,
        expires_in_seconds: int | None = None,
    ) -> tuple[str, int]:
        """Sign a token for ``subject`` and return it with its expiry timestamp."""
        kid = kid or self._config.active_kid
        secret = self._secret(kid)
        now = int(time.time())
        ttl = expires_in_seconds or self._config.token_ttl_seconds
        claims = Claims(sub=subject, roles=roles, iss=self._config.issuer, iat=now, exp=now + ttl)

        header = {"alg": self._config.algorithm, "typ": "JWT", "kid": kid}
        token = jwt.encode(header, claims.model_dump(exclude_none=True), secret)
        return (token.decode() if isinstance(token, bytes) else token), claims.exp

    def authenticate(self, bearer: str | None) -> Claims:
        """Validate an ``Authorization`` header value and return its claims."""
        parts = (bearer or "").split(" ")
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise AuthError("expected authorization header format: Bearer <token>")
        token = parts[1]

        try:
            header = _unverified_header(token)
            if token.count(".") != 2:
                raise ValueError("token contains an invalid number of segments")
        except ValueError as e:
            raise AuthError(f"error parsing token: {e}") from e

        kid = header.get("kid")
        if not kid or kid not in self._config.keys:
            raise AuthError(f"authentication failed : kid lookup failed: {kid}")
        if header.get("alg") != self._config.algorithm:
            raise AuthError(f"authentication failed : unexpected algorithm {header.get('alg')}")

        claims_options = {
            "iss": {"essential": True, "value": self._config.issuer},
            "exp": {"essential": True},
            "sub": {"essential": True},
        }
        try:
            decoded = jwt.decode(token, self._secret(kid), claims_options=claims_options)
            decoded.validate()
        except (JoseError, ValueError) as e:
            raise AuthError(f"authentication failed : {e}") from e

        claims = Claims.model_validate(dict(decoded))

        if self._config.check_user_enabled and self._user_enabled is not None:
            user_id = claims.user_id
            if user_id is None or not self._user_enabled(user_id):
                raise AuthError(f"user not enabled : {claims.sub}")

        return claims

    def authorize(
        self,
        claims: Claims,
        user_id: str | None,
        rule: str,
        table: str | None = None,
        action: str | None = None,
    ) -> None:
        """Raise :class:`AuthorizationError` unless ``claims`` satisfy the rule."""
        check = _RULES.get(rule)
        if check is None:
            raise ValueError(f"unknown rule: {rule}")

        if check(claims, user_id) and self._table_allowed(claims, table, action):
            return

        logger.bind(sub=claims.sub, rule=rule, table=table, action=action).info(
            "authorization denied"
        )
        if table and action:
            raise AuthorizationError(
                f"user does not have permission {action} for table: {table}"
            )
        raise AuthorizationError(
            f"you are not authorized for that action, claims[{claims.roles}] rule[{rule}]"
        )

    def _table_allowed(self, claims: Claims, table: str | None, action: str | None) -> bool:
        if table is None or action is None or claims.has_role(ROLE_ADMIN):
            return True
        for role in claims.roles:
            access = self._config.table_access.get(role, {})
            allowed = set(access.get("*", [])) | set(access.get(table, []))
            if action in allowed:
                return True
        return False

    def _secret(self, kid: str) -> str:
        try:
            return self._config.keys[kid]
        except KeyError as e:
            raise AuthError(f"kid lookup failed: {kid}") from e
