from .client import (
    AzureOpenAIChatClient,
    ChatCompletion,
    ChatCompletionClient,
    create_chat_client,
)

__all__ = [
    "AzureOpenAIChatClient",
    "ChatCompletion",
    "ChatCompletionClient",
    "create_chat_client",
]
