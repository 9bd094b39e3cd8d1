"""
Azure OpenAI Chat Proxy
FastAPI application forwarding chat requests to an Azure OpenAI deployment.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chat_proxy import __version__
from chat_proxy.api.routers import api_router, health_router
from chat_proxy.config.settings import Settings, get_settings
from chat_proxy.middleware.error_handling import ErrorHandlingMiddleware
from chat_proxy.middleware.request_logging import RequestLoggingMiddleware
from chat_proxy.services.azure_openai import ChatCompletionClient, create_chat_client


def configure_logging(settings: Settings) -> None:
    """Configure root logging from LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    # Startup
    settings: Settings = app.state.settings
    logging.info("Starting %s (%s)", settings.app_name, settings.environment)

    if not settings.is_chat_configured:
        logging.error(
            "Azure OpenAI configuration missing! Check AZURE_OPENAI_ENDPOINT, "
            "AZURE_OPENAI_DEPLOYMENT_NAME and AZURE_OPENAI_API_KEY"
        )

    if app.state.chat_client is None:
        app.state.chat_client = create_chat_client(settings)

    yield

    # Shutdown
    logging.info("Shutting down...")
    if app.state.chat_client is not None:
        await app.state.chat_client.close()
        app.state.chat_client = None


def create_app(
    settings: Optional[Settings] = None,
    chat_client: Optional[ChatCompletionClient] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="HTTP proxy for Azure OpenAI chat completions",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.chat_client = chat_client
    app.dependency_overrides[get_settings] = lambda: settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(ErrorHandlingMiddleware)
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware)

    app.include_router(api_router, prefix="/api")
    app.include_router(health_router)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
