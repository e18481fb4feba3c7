"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.ichor.api.http.app_data import ApplicationDependencies, build_dependencies
from src.ichor.api.http.errors import register_exception_handlers
from src.ichor.api.http.routers.assets import asset_tag, tag
from src.ichor.api.http.routers.config import form
from src.ichor.api.http.routers.core import auth, currency, user
from src.ichor.api.http.routers.geography import city, country, region, street
from src.ichor.api.http.routers.hr import office
from src.ichor.api.http.routers.inventory import inventory_transaction, lot_trackings
from src.ichor.api.http.routers.procurement import (
    po_line_item_status,
    supplier,
    supplier_product,
)
from src.ichor.api.http.routers.sales import order_line_item
from src.ichor.api.utils.app_startup import configure_logging
from src.ichor.core.sdk.errs import ErrorKind
from src.ichor.runtime.context import get_config

configure_logging()


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return response


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(
    title="ichor",
    lifespan=lifespan,
    docs_url=None if get_config().app.environment == "production" else "/docs",
    redoc_url=None if get_config().app.environment == "production" else "/redoc",
)

__all__ = ["app", "startup", "shutdown"]

app.add_middleware(SecurityHeadersMiddleware)

if get_config().app.environment == "production" and (
    "*" in get_config().app.cors.origins
):
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().app.cors.origins,
    allow_credentials=get_config().app.cors.allow_credentials,
    allow_methods=get_config().app.cors.allow_methods,
    allow_headers=get_config().app.cors.allow_headers,
)

register_exception_handlers(app)


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"code": ErrorKind.INTERNAL.value, "message": "internal error"},
                headers={"X-Request-ID": request_id},
            )

        duration_ms = (time.perf_counter() - start) * 1000
        logger.bind(
            status_code=response.status_code,
            duration_ms=round(duration_ms, 1),
        ).info("request.end")
        response.headers.setdefault("X-Request-ID", request_id)
        return response


# --- Router registration ---
app.include_router(auth.router, prefix="/v1/auth", tags=["auth"])

app.include_router(currency.router, prefix="/v1/core/currencies", tags=["core"])
app.include_router(user.router, prefix="/v1/core/users", tags=["core"])
app.include_router(form.router, prefix="/v1/config/forms", tags=["config"])
app.include_router(tag.router, prefix="/v1/assets/tags", tags=["assets"])
app.include_router(asset_tag.router, prefix="/v1/assets/assettags", tags=["assets"])
app.include_router(country.router, prefix="/v1/location/countries", tags=["location"])
app.include_router(region.router, prefix="/v1/location/regions", tags=["location"])
app.include_router(city.router, prefix="/v1/location/cities", tags=["location"])
app.include_router(street.router, prefix="/v1/location/streets", tags=["location"])
app.include_router(office.router, prefix="/v1/hr/offices", tags=["hr"])
app.include_router(
    supplier.router, prefix="/v1/procurement/suppliers", tags=["procurement"]
)
app.include_router(
    supplier_product.router,
    prefix="/v1/procurement/supplierproducts",
    tags=["procurement"],
)
app.include_router(
    po_line_item_status.router,
    prefix="/v1/procurement/purchaseorderlineitemstatuses",
    tags=["procurement"],
)
app.include_router(
    inventory_transaction.router,
    prefix="/v1/inventory/inventorytransactions",
    tags=["inventory"],
)
app.include_router(
    lot_trackings.router, prefix="/v1/inventory/lottrackings", tags=["inventory"]
)
app.include_router(
    order_line_item.router, prefix="/v1/sales/orderlineitems", tags=["sales"]
)


# --- Lifecycle hooks ---
async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    # Tests install their own dependencies before the app starts.
    if getattr(app.state, "app_dependencies", None) is None:
        app.state.app_dependencies = build_dependencies(config)

    deps: ApplicationDependencies = app.state.app_dependencies
    if not deps.database_service.health_check():
        if config.app.environment == "production":
            raise RuntimeError("Database is not reachable")
        logger.warning("Database health check failed at startup")


async def shutdown() -> None:
    logger.info("Shutting down application")
    deps: ApplicationDependencies | None = getattr(app.state, "app_dependencies", None)
    if deps is not None:
        metrics = deps.event_publisher.metrics()
        logger.bind(
            enqueued=metrics.total_enqueued, dropped=metrics.total_dropped
        ).info("Workflow publisher stopped")
        deps.database_service.engine.dispose()


# --- Route handlers ---
@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/ready")
async def readiness(request: Request) -> JSONResponse:
    """Readiness check endpoint; verifies the database connection."""
    deps: ApplicationDependencies | None = getattr(
        request.app.state, "app_dependencies", None
    )
    if deps is None or not deps.database_service.health_check():
        return JSONResponse(status_code=503, content={"status": "not ready"})
    return JSONResponse(content={"status": "ready"})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,
    )
