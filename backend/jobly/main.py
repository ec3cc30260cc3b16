import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from jobly.config import get_settings
from jobly.errors import ErrorKind, JoblyError
from jobly.logging_config import setup_logging
from jobly.routers import auth, health, jobs, users

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
}


app = FastAPI(
    title="Jobly",
    description="Users, job postings and job applications",
    version="1.0.0",
)

# Include routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(users.router, prefix="/api/users", tags=["users"])
app.include_router(jobs.router, prefix="/api/jobs", tags=["jobs"])


# Error handlers
@app.exception_handler(JoblyError)
async def jobly_error_handler(request: Request, exc: JoblyError):
    """Translate a domain error into its HTTP status."""
    return JSONResponse(
        status_code=STATUS_BY_KIND[exc.kind],
        content={"detail": exc.message},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with a generic 500."""
    # Log the exception with request context for debugging
    logger.exception(
        "Unhandled exception: %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )
