"""
Chat proxy endpoints.

Forwards user text to the Azure OpenAI deployment and returns the completion
as plain text.
"""
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse

from chat_proxy.api.dependencies.chat_client import get_chat_client
from chat_proxy.api.models import ChatRequest, ErrorResponse
from chat_proxy.controllers.chat_controller import ChatController
from chat_proxy.services.azure_openai import ChatCompletionClient

# ============================================================================
# Dependency Injection
# ============================================================================


def get_chat_controller(
    client: ChatCompletionClient = Depends(get_chat_client),
) -> ChatController:
    """Dependency injection for ChatController."""
    return ChatController(client)


# ============================================================================
# Router
# ============================================================================

router = APIRouter(prefix="/chat")

CHAT_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
    502: {"model": ErrorResponse, "description": "Chat provider error"},
    503: {"model": ErrorResponse, "description": "Chat client not configured"},
    504: {"model": ErrorResponse, "description": "Chat provider timed out"},
}


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/simple",
    status_code=status.HTTP_200_OK,
    response_class=PlainTextResponse,
    responses=CHAT_ERROR_RESPONSES,
)
async def simple_chat(
    request: Request,
    controller: ChatController = Depends(get_chat_controller),
) -> PlainTextResponse:
    """
    Simple chat endpoint.

    The whole request body is sent as the user message using the deployment's
    default options. Returns the completion as text/plain.
    """
    body = await request.body()
    content = await controller.simple_chat(body)
    return PlainTextResponse(content)


@router.post(
    "/detailed",
    status_code=status.HTTP_200_OK,
    response_class=PlainTextResponse,
    responses=CHAT_ERROR_RESPONSES,
)
async def detailed_chat(
    request: ChatRequest,
    controller: ChatController = Depends(get_chat_controller),
) -> PlainTextResponse:
    """
    Detailed chat endpoint.

    Takes a userMessage with an optional systemMessage and temperature and
    returns the completion as text/plain.
    """
    content = await controller.detailed_chat(request)
    return PlainTextResponse(content)
