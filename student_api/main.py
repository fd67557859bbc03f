"""
Student Records API - Main Application

FastAPI backend with:
- MongoDB for student documents (database "pbscybsec", collection "students")
- Plain-text error bodies, JSON success bodies

Run: student-api
  or uvicorn student_api.main:app --port 8080
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from student_api import __version__
from student_api.api.routes import api_router
from student_api.core.config import get_settings, SERVER_HOST, SERVER_PORT
from student_api.core.log import configure_logging, get_logger
from student_api.db.mongodb import create_mongo_client, get_students_collection
from student_api.schemas.schemas import format_validation_errors
from student_api.services.student_service import StudentService

logger = get_logger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Undecodable requests are a bad request, not FastAPI's default 422
    return PlainTextResponse(format_validation_errors(exc.errors()), status_code=400)


def connect_store(app: FastAPI) -> None:
    """Connect to MongoDB unless a service was injected."""
    if app.state.student_service is not None:
        return
    # Also reached under `uvicorn student_api.main:app`, which skips run()
    configure_logging()
    settings = get_settings()
    try:
        client = create_mongo_client(settings.mongodb_uri)
    except PyMongoError as e:
        logger.critical("Could not connect to MongoDB: %s", e)
        raise
    app.state.mongo_client = client
    app.state.student_service = StudentService(get_students_collection(client))
    logger.info("Connected to MongoDB")
    logger.info("Server started on :%d", SERVER_PORT)


def disconnect_store(app: FastAPI) -> None:
    if app.state.mongo_client is not None:
        app.state.mongo_client.close()
        app.state.mongo_client = None
        logger.info("MongoDB connection closed")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup connects the store (a failure aborts startup);
    shutdown closes the client.
    """
    connect_store(app)
    yield
    disconnect_store(app)


def create_app(student_service: Optional[StudentService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        student_service: Pre-built service (tests). When omitted, startup
            connects to MONGODB_URI and builds one; a failed connection
            aborts startup.
    """
    app = FastAPI(
        title="Student Records API",
        description="CRUD over a single MongoDB collection of students.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.student_service = student_service
    app.state.mongo_client = None

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve on the fixed port."""
    configure_logging()
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    run()
