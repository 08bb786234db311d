# main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from job_portal.config import Settings, build_sqlalchemy_db_url, get_settings, missing_required_settings
from job_portal.database import create_db_engine, create_session_factory, mask_db_url
from job_portal.db.bootstrap import initialize_database
from job_portal.errors import ApiError, ConfigurationError
from job_portal.routers import admin, auth, health, jobs


logger = logging.getLogger("uvicorn.error")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}


def _message(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def _outer_headers(request: Request) -> dict[str, str]:
    """Headers for responses built outside the middleware stack (unhandled errors)."""

    headers = dict(SECURITY_HEADERS)
    origin = request.headers.get("origin")
    if origin:
        allowed = request.app.state.settings.cors_origins
        if "*" in allowed:
            headers["Access-Control-Allow-Origin"] = "*"
        elif origin in allowed:
            headers["Access-Control-Allow-Origin"] = origin
            headers["Access-Control-Allow-Credentials"] = "true"
            headers["Vary"] = "Origin"
    return headers


def register_exception_handlers(application: FastAPI) -> None:
    @application.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return _message(exc.status_code, exc.message)

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _message(status.HTTP_400_BAD_REQUEST, "Dữ liệu không hợp lệ")

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return _message(status.HTTP_404_NOT_FOUND, "API endpoint not found")
        return _message(exc.status_code, str(exc.detail))

    @application.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Lỗi server")

    @application.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong!", _outer_headers(request))


def create_app(settings: Settings | None = None) -> FastAPI:
    app_settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        missing = missing_required_settings(app_settings)
        if missing:
            logger.error("Missing required environment variables: %s", ", ".join(missing))
            raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

        db_url = build_sqlalchemy_db_url(app_settings)
        logger.info("SQLAlchemy db_url=%s", mask_db_url(db_url))
        engine = create_db_engine(app_settings)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        try:
            with app.state.session_factory() as db:
                initialize_database(engine, db)
        except Exception:
            logger.exception("Database initialization failed")
            engine.dispose()
            raise

        logger.info("Server is running on port %s", app_settings.port)
        try:
            yield
        finally:
            engine.dispose()

    application = FastAPI(
        title=app_settings.app_name,
        version=app_settings.version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    application.state.settings = app_settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
    )

    @application.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    register_exception_handlers(application)

    application.include_router(health.router)
    application.include_router(auth.router)
    application.include_router(jobs.router)
    application.include_router(admin.router)
    return application


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run("job_portal.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
