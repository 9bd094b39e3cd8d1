"""
Chat controller for proxying requests to the chat completion client.

Validates input, assembles the prompt and returns the completion text.
Provider failures are not caught here; the error handling middleware maps them
to 5xx responses.
"""
import logging

from fastapi import HTTPException, status

from chat_proxy.api.models.chat import ChatRequest
from chat_proxy.services.azure_openai import ChatCompletionClient
from chat_proxy.services.prompts import build_prompt

logger = logging.getLogger(__name__)


class ChatController:
    """Controller for chat proxy operations."""

    def __init__(self, client: ChatCompletionClient):
        """Initialize chat controller with a chat completion client."""
        self.client = client

    def _validate_request(self, request: ChatRequest) -> None:
        """
        Validate detailed chat request.

        Args:
            request: ChatRequest with userMessage and optional systemMessage/temperature

        Raises:
            HTTPException 400: If userMessage is missing or blank
        """
        if request.user_message is None or not request.user_message.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="userMessage must not be empty",
            )

    def _decode_message(self, body: bytes) -> str:
        """
        Decode a raw simple chat body into the user message.

        Raises:
            HTTPException 400: If the body is not UTF-8 or is blank
        """
        try:
            message = body.decode("utf-8")
        except UnicodeDecodeError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Request body must be UTF-8 encoded text",
            )

        if not message.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Request body must not be empty",
            )
        return message

    async def simple_chat(self, body: bytes) -> str:
        """
        Forward the raw body as a single user message.

        Args:
            body: Raw request body, used unmodified as the user message

        Returns:
            Completion text
        """
        message = self._decode_message(body)
        completion = await self.client.complete(message)
        logger.info(
            "Simple chat completed: model=%s, tokens=%s",
            completion.model, completion.tokens_used,
        )
        return completion.content

    async def detailed_chat(self, request: ChatRequest) -> str:
        """
        Build a prompt from the request and return the completion text.

        Args:
            request: Validated ChatRequest

        Returns:
            Completion text
        """
        self._validate_request(request)

        prompt = build_prompt(
            request.user_message,
            system_message=request.system_message,
            temperature=request.temperature,
        )
        completion = await self.client.call(prompt)
        logger.info(
            "Detailed chat completed: model=%s, tokens=%s, system=%s, temperature=%s",
            completion.model,
            completion.tokens_used,
            prompt.system_message is not None,
            prompt.options.get("temperature"),
        )
        return completion.content
