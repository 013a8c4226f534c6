import logging
import os
import time
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR, HTTP_502_BAD_GATEWAY

from app.core.exceptions import ConfigurationError, EmailDeliveryError


logger = logging.getLogger("contactmail")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


# ---------------------------
# Configure Logging
# ---------------------------
def configure_logging(log_dir: str = "logs") -> logging.Logger:
    """Attach console and rotating file handlers to the app logger once."""
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return logger

    os.makedirs(log_dir, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "app.log"),
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=5,
    )
    console_handler = logging.StreamHandler()

    for handler in (file_handler, console_handler):
        handler.setLevel(logging.INFO)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


# ---------------------------
# Add Exception Handlers
# ---------------------------
def add_exception_handlers(app: FastAPI):

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        logger.info(f"Incoming request: {request.method} {request.url}")

        response = await call_next(request)

        duration = time.time() - start_time
        if duration > 1.0:
            logger.warning(
                f"Slow request: {request.method} {request.url} took {duration:.2f}s"
            )
        else:
            logger.info(
                f"Completed request: {request.method} {request.url} -> "
                f"{response.status_code} in {duration:.2f}s"
            )
        return response

    #  Invalid contact form payloads
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        messages = [err["msg"] for err in exc.errors()]
        logger.warning(f"Validation error at {request.url}: {messages}")

        if len(messages) == 1:
            return JSONResponse(status_code=422, content={"msg": messages[0]})
        return JSONResponse(status_code=422, content={"errors": messages})

    #  Unknown routes and wrong methods
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"{exc.status_code} at {request.method} {request.url}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"msg": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    #  Missing submission
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        logger.warning(f"ValueError at {request.url}: {exc}")
        return JSONResponse(status_code=400, content={"msg": str(exc)})

    # Delivery failures are already logged with the submitter's address
    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        logger.warning(f"Email service not configured, request to {request.url} failed")
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={"msg": "Email service is not configured"},
        )

    @app.exception_handler(EmailDeliveryError)
    async def delivery_error_handler(request: Request, exc: EmailDeliveryError):
        logger.warning(f"{type(exc).__name__}, request to {request.url} failed")
        return JSONResponse(
            status_code=HTTP_502_BAD_GATEWAY,
            content={"msg": "Failed to send email"},
        )

    #  Catch-All for Unexpected Errors
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.critical(f"Unexpected error at {request.url}: {repr(exc)}")
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={"msg": "An unexpected error occurred. Please try again."},
        )
