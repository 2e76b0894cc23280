import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from forum_api.core.config import get_settings
from forum_api.core.logging import configure_logging
from forum_api.core.responses import send_error
from forum_api.core.validation import ValidationError
from forum_api.routers import pages as pages_router
from forum_api.routers import threads as threads_router
from forum_api.routers import users as users_router
from forum_api.services.errors import ForumError

log = configure_logging()
logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (anti clickjacking, no sniffing, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


class RequestLogMiddleware(BaseHTTPMiddleware):
    """One log line per request, including requests that end in an unhandled error."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, status_code, elapsed_ms)


app = FastAPI(title="Forum API")

settings = get_settings()

allowed_cors = {settings.public_base_url}
if settings.app_env != "prod":
    allowed_cors.update(
        {
            "http://localhost:8000",
            "http://127.0.0.1:8000",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        }
    )
allowed_cors = {origin for origin in allowed_cors if origin}
if allowed_cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(allowed_cors),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
app.add_middleware(RequestLogMiddleware)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return send_error(400, exc.message, {"errors": exc.errors})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return send_error(400, "Invalid request parameters", {"errors": exc.errors()})


@app.exception_handler(ForumError)
async def forum_error_handler(request: Request, exc: ForumError):
    return send_error(exc.status_code, exc.message, exc.additional_information)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return send_error(exc.status_code, str(exc.detail))


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Store error on %s %s", request.method, request.url.path, exc_info=exc)
    return send_error(500, f"{request.url.path} error", {"path": request.url.path, "detail": str(exc)})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("Unexpected error on %s %s", request.method, request.url.path, exc_info=exc)
    return send_error(500, f"{request.url.path} error", {"path": request.url.path, "detail": str(exc)})


app.include_router(threads_router.router)
app.include_router(pages_router.router)
app.include_router(users_router.router)

log.info("Forum API configured (env=%s)", settings.app_env)


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn."""
    return app
