"""Sign-in endpoint issuing bearer tokens."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from src.ichor.api.http.app_data import ApplicationDependencies
from src.ichor.api.http.deps import get_app_dependencies, get_db_session
from src.ichor.application.core.auth import AuthApp, LoginRequest, LoginResponse
from src.ichor.entities.core.user import UserService

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    deps: ApplicationDependencies = Depends(get_app_dependencies),
    session: Session = Depends(get_db_session),
) -> LoginResponse:
    """Exchange email and password for a signed token."""
    users = deps.service(UserService, session)
    return AuthApp(deps.auth, users).login(body)
