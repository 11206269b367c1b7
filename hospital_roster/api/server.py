"""FastAPI application for the hospital duty roster."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from hospital_roster.api.routes import admin, public
from hospital_roster.api.schemas import HealthResponse
from hospital_roster.api.state import app_state
from hospital_roster.config.settings import settings
from hospital_roster.database.db import get_engine, get_session_factory, init_database
from hospital_roster.exceptions import ValidationFailed

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    startup_event()
    yield
    shutdown_event()


app = FastAPI(
    title="Hospital Duty Roster API",
    description="Staff roster, duty schedule and hospital profile administration",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(public.router)
app.include_router(admin.router)


def startup_event():
    """Connect to the database, create missing tables and seed defaults."""
    logger.info("=" * 80)
    logger.info("STARTING HOSPITAL ROSTER API SERVER")
    logger.info("=" * 80)

    try:
        logger.info(f"Connecting to database: {settings.database_url}")
        app_state.db_engine = get_engine(settings.database_url)
        app_state.SessionLocal = get_session_factory(app_state.db_engine)
        init_database(app_state.db_engine)
        app_state.initialized = True
        logger.info("✓ SERVER READY")
    except Exception as e:
        logger.error(f"Failed to initialize server: {e}", exc_info=True)
        raise


def shutdown_event():
    """Release the database connection pool"""
    logger.info("Shutting down server...")
    if app_state.db_engine:
        app_state.db_engine.dispose()
    app_state.initialized = False
    logger.info("✓ Database connection closed")


# ============================================================================
# Error responses: always {"error": message}
# ============================================================================

@app.exception_handler(ValidationFailed)
async def validation_failed_handler(request: Request, exc: ValidationFailed):
    logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.warning(f"{request.method} {request.url.path} invalid request: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"{request.method} {request.url.path} database error: {exc}", exc_info=exc)
    message = str(getattr(exc, "orig", None) or exc)
    return JSONResponse(status_code=500, content={"error": message})


@app.get("/health", response_model=HealthResponse, tags=["Info"])
def health_check():
    """Report whether the database answers a trivial query."""
    database_ok = False
    if app_state.db_engine:
        try:
            with app_state.db_engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            database_ok = True
        except SQLAlchemyError as e:
            logger.warning(f"Health check query failed: {e}")

    return {
        "status": "healthy" if app_state.initialized and database_ok else "unhealthy",
        "database_connected": database_ok,
    }
