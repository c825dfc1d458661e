# app/main.py

"""Blog API - posts, categories and search over SQLModel."""

from logging import getLogger

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.configs import file_logger, settings
from app.errors import (
    BaseAppError,
    DatabaseError,
    ServiceError,
    create_exception_handler,
    database_exception_handler,
    service_exception_handler,
    validation_exception_handler,
)
from app.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from app.routes import blog_router, category_router
from app.utils.helpers import today_str

logger = file_logger(getLogger(__name__))

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog API",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")


routes = [
    blog_router,
    category_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (ServiceError, service_exception_handler),
    (DatabaseError, database_exception_handler),
    (BaseAppError, create_exception_handler(logger)),
    (RequestValidationError, validation_exception_handler),
    (Exception, create_exception_handler(logger)),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 10:00:00",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check() -> ORJSONResponse:
    """
    Health check endpoint.

    Returns
    -------
    ORJSONResponse
        Service version, status and local timestamp.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "2025-01-01 10:00:00"}
    """
    return ORJSONResponse(
        {
            "version": app.version,
            "status": "ok",
            "timestamp": today_str(),
        },
    )


if __name__ == "__main__":
    from uvicorn import run

    run(
        app,
        host="127.0.0.1",
        port=8000,
        log_level="info",
        loop="uvloop",
        http="httptools",
    )
