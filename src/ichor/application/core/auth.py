"""Application layer: token issuance for email/password sign-in."""

import uuid
from datetime import UTC, datetime

from loguru import logger
from pydantic import BaseModel, EmailStr, Field

from src.ichor.core.sdk.errors import AuthenticationError
from src.ichor.core.sdk.errs import AppError, ErrorKind
from src.ichor.core.services.auth import Auth
from src.ichor.entities.core.user import UserService


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, repr=False)


class LoginResponse(BaseModel):
    token: str
    user_id: uuid.UUID
    email: str
    roles: list[str]
    expires_at: datetime


class AuthApp:
    def __init__(self, auth: Auth, users: UserService) -> None:
        self.auth = auth
        self.users = users

    def login(self, req: LoginRequest) -> LoginResponse:
        try:
            user = self.users.authenticate(req.email, req.password)
        except AuthenticationError as e:
            logger.bind(email=req.email).info("login rejected: {}", e)
            raise AppError.new(ErrorKind.UNAUTHENTICATED, e) from e

        token, expires = self.auth.generate_token(str(user.id), user.roles)
        logger.bind(user_id=str(user.id)).info("login succeeded")
        return LoginResponse(
            token=token,
            user_id=user.id,
            email=user.email,
            roles=user.roles,
            expires_at=datetime.fromtimestamp(expires, UTC),
        )
