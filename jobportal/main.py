"""
Job Portal - Main Application

FastAPI backend over six independent key-value stores:
- users, education_history, work_history, companies, jobs, job_applications
- referential integrity and ownership enforced by the managers, not the store
- caller identity from JWT bearer tokens

Run: uvicorn jobportal.main:app --reload

Routes are async and call the (synchronous) managers directly, so each
operation runs to completion on the event loop before the next one starts.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobportal.api.deps import OperationFailed
from jobportal.api.routes import api_router
from jobportal.core.config import get_settings
from jobportal.core.errors import ErrorKind, describe_validation_error
from jobportal.services import PortalServices

logger = logging.getLogger(__name__)


def create_app(services: Optional[PortalServices] = None) -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    app = FastAPI(
        title="Job Portal",
        description="""
        Recruitment backend: job seekers, companies, job posts and applications.

        ## Features
        - **Users**: Register profile, education and work history
        - **Companies**: Register and manage companies (admin = creator)
        - **Jobs**: Post, update, close and remove jobs; list open jobs
        - **Applications**: Apply to open jobs
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.services = services or PortalServices.from_settings(settings)
    app.state.storage_backend = settings.storage_backend if services is None else "injected"

    # CORS middleware (allow all for development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(OperationFailed)
    async def operation_failed_handler(request: Request, exc: OperationFailed):
        return JSONResponse(
            status_code=exc.status_code,
            content={"kind": exc.failure.kind.value, "detail": exc.failure.detail}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"kind": ErrorKind.validation_failed.value, "detail": describe_validation_error(exc)}
        )

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Storage backend health."""
        backend = app.state.storage_backend
        if backend == "mongo":
            from jobportal.db.mongodb import test_mongo_connection
            connected = test_mongo_connection()
        elif backend == "sql":
            from jobportal.db.postgres import test_postgres_connection
            connected = test_postgres_connection()
        else:
            connected = True
        return {
            "status": "healthy" if connected else "degraded",
            "storage": backend,
            "connected": connected
        }

    logger.info("Job Portal started with %s storage", app.state.storage_backend)
    return app


app = create_app()
