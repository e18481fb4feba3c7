"""User endpoints.

Users may update their own profile; everything else follows the standard
admin-only write rules. Roles change only through ``PUT /role/{id}``.
"""

from fastapi import Depends
from sqlmodel import Session

from src.ichor.api.http.app_data import ApplicationDependencies
from src.ichor.api.http.deps import authorize, get_app_dependencies, get_db_session
from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.core import user as userapp
from src.ichor.core.services.auth import ACTION_UPDATE, RULE_ADMIN_ONLY
from src.ichor.entities.core.user import UserService

TABLE = "core.users"

router = crud_router(
    app_cls=userapp.UserApp,
    service_cls=UserService,
    table=TABLE,
    model=userapp.User,
    new_model=userapp.NewUser,
    update_model=userapp.UpdateUser,
    query_model=userapp.UserQueryParams,
    subject_writes=True,
)


def get_user_app(
    deps: ApplicationDependencies = Depends(get_app_dependencies),
    session: Session = Depends(get_db_session),
) -> userapp.UserApp:
    return userapp.UserApp(deps.service(UserService, session))


@router.put(
    "/role/{id}",
    response_model=userapp.User,
    dependencies=[Depends(authorize(RULE_ADMIN_ONLY, TABLE, ACTION_UPDATE))],
)
def update_role(
    id: str,
    body: userapp.UpdateUserRole,
    app: userapp.UserApp = Depends(get_user_app),
    session: Session = Depends(get_db_session),
):
    updated = app.update_roles(id, body)
    session.commit()
    return updated
