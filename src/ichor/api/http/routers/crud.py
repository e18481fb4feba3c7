"""Router factory for the standard CRUD endpoint set.

Each domain router module calls :func:`crud_router` with its app-layer
class, business service, DTOs and authorization table name. The resulting
router exposes::

    GET    ""              list with paging, ordering and filters
    GET    "/all"          every row (only when ``include_all``)
    GET    "/{id}"         one row
    POST   ""              create
    POST   "/batch/query"  rows for a list of ids
    PUT    "/{id}"         partial update
    DELETE "/{id}"         delete

Handlers commit the request session after every successful write.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from src.ichor.api.http.app_data import ApplicationDependencies
from src.ichor.api.http.deps import (
    authorize,
    get_app_dependencies,
    get_db_session,
    query_params,
)
from src.ichor.core.sdk.crud import CrudService
from src.ichor.core.sdk.crudapp import CrudApp, QueryByIDsRequest, QueryParams
from src.ichor.core.sdk.query import Result
from src.ichor.core.services.auth import (
    ACTION_CREATE,
    ACTION_DELETE,
    ACTION_READ,
    ACTION_UPDATE,
    RULE_ADMIN_ONLY,
    RULE_ADMIN_OR_SUBJECT,
    RULE_ANY,
)


def crud_router(
    *,
    app_cls: type[CrudApp],
    service_cls: type[CrudService],
    table: str,
    model: type,
    new_model: type,
    update_model: type,
    query_model: type[QueryParams],
    include_all: bool = False,
    subject_writes: bool = False,
) -> APIRouter:
    """Build the CRUD router for one domain.

    ``subject_writes`` lets the owner of a row (token subject equal to the
    ``id`` path parameter) update and delete it, as users do for their own
    account.
    """
    router = APIRouter()

    def get_app(
        deps: ApplicationDependencies = Depends(get_app_dependencies),
        session: Session = Depends(get_db_session),
    ) -> CrudApp:
        return app_cls(deps.service(service_cls, session))

    read = authorize(RULE_ANY, table, ACTION_READ)
    create_rule = authorize(RULE_ADMIN_ONLY, table, ACTION_CREATE)
    if subject_writes:
        update_rule = authorize(RULE_ADMIN_OR_SUBJECT, table, ACTION_UPDATE, "id")
        delete_rule = authorize(RULE_ADMIN_OR_SUBJECT, table, ACTION_DELETE, "id")
    else:
        update_rule = authorize(RULE_ADMIN_ONLY, table, ACTION_UPDATE)
        delete_rule = authorize(RULE_ADMIN_ONLY, table, ACTION_DELETE)

    @router.get("", response_model=Result[model], dependencies=[Depends(read)])
    def query(
        qp: query_model = Depends(query_params(query_model)),
        app: CrudApp = Depends(get_app),
    ):
        return app.query(qp)

    if include_all:

        @router.get("/all", response_model=list[model], dependencies=[Depends(read)])
        def query_all(app: CrudApp = Depends(get_app)):
            return app.query_all()

    @router.get("/{id}", response_model=model, dependencies=[Depends(read)])
    def query_by_id(id: str, app: CrudApp = Depends(get_app)):
        return app.query_by_id(id)

    @router.post(
        "/batch/query", response_model=list[model], dependencies=[Depends(read)]
    )
    def query_by_ids(body: QueryByIDsRequest, app: CrudApp = Depends(get_app)):
        return app.query_by_ids(body.ids)

    @router.post("", response_model=model, dependencies=[Depends(create_rule)])
    def create(
        body: new_model,
        app: CrudApp = Depends(get_app),
        session: Session = Depends(get_db_session),
    ):
        created = app.create(body)
        session.commit()
        return created

    @router.put("/{id}", response_model=model, dependencies=[Depends(update_rule)])
    def update(
        id: str,
        body: update_model,
        app: CrudApp = Depends(get_app),
        session: Session = Depends(get_db_session),
    ):
        updated = app.update(id, body)
        session.commit()
        return updated

    @router.delete(
        "/{id}",
        status_code=status.HTTP_204_NO_CONTENT,
        dependencies=[Depends(delete_rule)],
    )
    def delete(
        id: str,
        app: CrudApp = Depends(get_app),
        session: Session = Depends(get_db_session),
    ):
        app.delete(id)
        session.commit()
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
