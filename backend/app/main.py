from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from fastapi import APIRouter

from app.api.routes import email_routes
from app.core.config import Settings, get_settings
from app.core.error_handlers import add_exception_handlers, configure_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging()

    # Interactive docs only in development
    docs_enabled = settings.APP_ENV == "development"

    app = FastAPI(
        title="Contact Mailer",
        description="Email sending API for contact form submissions",
        version="1.0.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    # Global exception handlers
    add_exception_handlers(app)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.APP_ENV == "production":
        app.add_middleware(HTTPSRedirectMiddleware)

    #  Create API router
    api_router = APIRouter(prefix="/api")

    api_router.include_router(email_routes.router)

    app.include_router(api_router)

    return app


app = create_app()
