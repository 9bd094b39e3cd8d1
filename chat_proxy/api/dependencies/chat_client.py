"""
Chat client dependency for FastAPI endpoints.
"""
import logging

from fastapi import HTTPException, Request, status

from chat_proxy.services.azure_openai import ChatCompletionClient

logger = logging.getLogger(__name__)


def get_chat_client(request: Request) -> ChatCompletionClient:
    """
    Return the chat client created at application startup.

    Raises:
        HTTPException 503: If Azure OpenAI settings were incomplete at startup
    """
    client = getattr(request.app.state, "chat_client", None)
    if client is None:
        logger.warning("Chat request rejected: Azure OpenAI client is not configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Chat client is not configured",
        )
    return client
