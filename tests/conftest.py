import pytest
from fastapi.testclient import TestClient

from chat_proxy.config.settings import Settings
from chat_proxy.services.azure_openai import ChatCompletion, ChatCompletionClient
from main import create_app

AZURE_ENV_VARS = (
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_DEPLOYMENT_NAME",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_API_VERSION",
    "AZURE_OPENAI_TEMPERATURE",
    "SYSTEM_ENVIRONMENT",
)


class FakeChatClient(ChatCompletionClient):
    """Records every call and answers with a canned completion or error."""

    def __init__(self, reply: str = "fake reply", error: Exception = None):
        self.reply = reply
        self.error = error
        self.completed = []
        self.prompts = []
        self.closed = False

    async def complete(self, user_text):
        self.completed.append(user_text)
        return self._respond()

    async def call(self, prompt):
        self.prompts.append(prompt)
        return self._respond()

    async def close(self):
        self.closed = True

    @property
    def call_count(self):
        return len(self.completed) + len(self.prompts)

    def _respond(self):
        if self.error is not None:
            raise self.error
        return ChatCompletion(content=self.reply, model="gpt-4o", tokens_used=12)


def make_settings(**values) -> Settings:
    """Settings that ignore .env files."""
    return Settings(_env_file=None, **values)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in AZURE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return make_settings(
        AZURE_OPENAI_ENDPOINT="https://example-resource.openai.azure.com/",
        AZURE_OPENAI_DEPLOYMENT_NAME="gpt-4o",
        AZURE_OPENAI_API_KEY="sk-ABCDEFG",
    )


@pytest.fixture
def fake_client():
    return FakeChatClient()


@pytest.fixture
def client(settings, fake_client):
    app = create_app(settings=settings, chat_client=fake_client)
    return TestClient(app)
