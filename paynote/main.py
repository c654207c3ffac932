"""
PayNote: FastAPI Application.

This is the entry point for the application.
Middleware, error handlers and routers are registered here.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.sessions import SessionMiddleware

from paynote.config import get_settings
from paynote.errors import InternalError, PayNoteError, ValidationError
from paynote.logging_setup import configure_logging, get_logger
from paynote.api.auth import router as auth_router
from paynote.api.dashboard import router as dashboard_router
from paynote.api.health import router as health_router
from paynote.api.transactions import router as transactions_router

settings = get_settings()

configure_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Personal ledger for money given to and received from people",
    debug=settings.DEBUG,
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
    max_age=settings.SESSION_MAX_AGE,
    https_only=settings.SESSION_HTTPS_ONLY,
)


# --- Error handlers ---

@app.exception_handler(PayNoteError)
async def paynote_error_handler(request: Request, exc: PayNoteError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors: 400, not FastAPI's default 422."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(
        status_code=400, content=ValidationError(str(message)).to_dict()
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Unhandled database error on %s", request.url.path)
    return JSONResponse(
        status_code=500, content=InternalError("Internal server error").to_dict()
    )


# Register routers
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(transactions_router)
app.include_router(dashboard_router)


def run() -> None:
    """Serve the app with uvicorn using HOST/PORT from settings."""
    import uvicorn

    uvicorn.run(
        "paynote.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
