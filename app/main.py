from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError as SettingsError
from sqlalchemy.exc import SQLAlchemyError

from app.config import Settings, load_settings
from app.database import Base, build_engine, build_session_factory
from app.errors import AppError, InternalError, ValidationError
from app.security.tokens import TokenService
from app.users.routers import router as user_router
from app.expenses.router import router as expenses_router

# Register models on Base.metadata
from app.users import models as user_models  # noqa: F401
from app.expenses import models as expense_models  # noqa: F401

import sys
import uvicorn
from datetime import timedelta
from contextlib import asynccontextmanager


def configure_logging(settings: Settings):
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)
    if settings.LOG_FILE:
        logger.add(settings.LOG_FILE, rotation="500 MB", level=settings.LOG_LEVEL)


def format_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ValidationError.message
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", ValidationError.message)
    return f"{field}: {msg}" if field else msg


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        error = ValidationError(format_validation_error(exc))
        logger.info(f"{request.method} {request.url.path} rejected: {error.message}")
        return JSONResponse(status_code=error.status_code, content={"message": error.message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
        error = InternalError()
        return JSONResponse(status_code=error.status_code, content={"message": error.message})


def create_app(settings: Settings) -> FastAPI:
    engine = build_engine(settings.DATABASE_URL)

    # Database startup
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application startup")
        try:
            Base.metadata.create_all(bind=engine)
        except SQLAlchemyError as exc:
            logger.critical(f"Cannot reach the database: {exc}")
            raise
        yield
        engine.dispose()
        logger.info("Application shutdown")

    app = FastAPI(
        title="EXPENSE TRACKER",
        description="An API for registering users and tracking their personal expenses.",
        version="1.0.0",
        lifespan=lifespan
    )

    app.state.session_factory = build_session_factory(engine)
    app.state.token_service = TokenService(
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(user_router, prefix="/api/users", tags=["Users"])
    app.include_router(expenses_router, prefix="/api/expenses", tags=["Expenses"])

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


def run():
    try:
        settings = load_settings()
    except SettingsError as exc:
        logger.critical(f"Invalid startup configuration: {exc}")
        sys.exit(1)

    configure_logging(settings)
    app = create_app(settings)
    logger.info(f"Running on {settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
