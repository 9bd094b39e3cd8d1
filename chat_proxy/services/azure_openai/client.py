"""
Chat completion clients.

ChatCompletionClient is the seam between the HTTP layer and the hosted model.
AzureOpenAIChatClient implements it on top of the openai SDK's
AsyncAzureOpenAI client; authentication, transport and retries belong to the SDK.
"""
import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from openai import AsyncAzureOpenAI

from chat_proxy.config.settings import Settings
from chat_proxy.services.prompts import Prompt, build_prompt

logger = logging.getLogger(__name__)


@dataclass
class ChatCompletion:
    """Result from a chat completion."""
    content: str
    model: Optional[str] = None
    tokens_used: Optional[int] = None
    latency_ms: Optional[int] = None


class ChatCompletionClient(ABC):
    """Abstract interface for chat completion backends."""

    @abstractmethod
    async def complete(self, user_text: str) -> ChatCompletion:
        """Send a lone user message using the client's default options."""
        pass

    @abstractmethod
    async def call(self, prompt: Prompt) -> ChatCompletion:
        """
        Send an assembled prompt.

        Args:
            prompt: System/user messages plus generation options

        Returns:
            ChatCompletion with the generated text

        Raises:
            openai.OpenAIError subclasses on provider or transport failure
        """
        pass

    async def close(self) -> None:
        """Release network resources."""
        pass


class AzureOpenAIChatClient(ChatCompletionClient):
    """Chat completion client backed by an Azure OpenAI deployment."""

    def __init__(self, settings: Settings, client: Optional[AsyncAzureOpenAI] = None):
        self._deployment = settings.azure_openai_deployment_name
        self._default_temperature = settings.azure_openai_temperature
        self._client = client or AsyncAzureOpenAI(
            azure_endpoint=settings.azure_openai_endpoint,
            api_key=settings.azure_openai_api_key,
            api_version=settings.azure_openai_api_version,
            timeout=settings.azure_openai_timeout_seconds,
            max_retries=settings.azure_openai_max_retries,
        )

    @property
    def deployment_name(self) -> str:
        return self._deployment

    async def complete(self, user_text: str) -> ChatCompletion:
        return await self.call(build_prompt(user_text))

    async def call(self, prompt: Prompt) -> ChatCompletion:
        params: Dict[str, Any] = {
            "model": self._deployment,
            "messages": prompt.to_messages(),
        }
        if self._default_temperature is not None:
            params["temperature"] = self._default_temperature
        params.update(prompt.options)

        return await self._create(params)

    async def _create(self, params: Dict[str, Any]) -> ChatCompletion:
        messages: List[Dict[str, str]] = params["messages"]
        logger.debug(
            "Azure OpenAI request: deployment=%s, messages=%d, temperature=%s",
            self._deployment, len(messages), params.get("temperature"),
        )

        start_time = time.time()
        try:
            completion = await self._client.chat.completions.create(**params)
        except Exception as e:
            latency_ms = int((time.time() - start_time) * 1000)
            logger.error(
                "Azure OpenAI error after %dms: %s", latency_ms, type(e).__name__
            )
            raise

        latency_ms = int((time.time() - start_time) * 1000)
        content = ""
        if completion.choices:
            content = completion.choices[0].message.content or ""
        tokens_used = completion.usage.total_tokens if completion.usage else None

        logger.debug(
            "Azure OpenAI response: latency=%dms, tokens=%s, content_len=%d",
            latency_ms, tokens_used, len(content),
        )

        return ChatCompletion(
            content=content,
            model=completion.model,
            tokens_used=tokens_used,
            latency_ms=latency_ms,
        )

    async def close(self) -> None:
        await self._client.close()


def create_chat_client(settings: Settings) -> Optional[ChatCompletionClient]:
    """
    Create the chat client for the configured deployment.

    Returns None when the endpoint, deployment name or API key is missing.
    """
    if not settings.is_chat_configured:
        logger.warning(
            "Azure OpenAI is not fully configured; chat endpoints will return 503"
        )
        return None

    logger.info(
        "Initializing Azure OpenAI client: endpoint=%s, deployment=%s",
        settings.azure_openai_endpoint, settings.azure_openai_deployment_name,
    )
    return AzureOpenAIChatClient(settings)
