"""
Provider failures must surface as 5xx responses without leaking the API key.
"""
import httpx
import openai
import pytest
from fastapi.testclient import TestClient

from main import create_app

from .conftest import FakeChatClient, make_settings

API_KEY = "sk-SECRETKEY123456"
REQUEST = httpx.Request("POST", "https://example-resource.openai.azure.com/openai/deployments/gpt-4o/chat/completions")


def status_error(cls, code, message):
    return cls(message, response=httpx.Response(code, request=REQUEST), body=None)


def post_with_error(error, environment="local"):
    settings = make_settings(
        AZURE_OPENAI_ENDPOINT="https://example-resource.openai.azure.com/",
        AZURE_OPENAI_DEPLOYMENT_NAME="gpt-4o",
        AZURE_OPENAI_API_KEY=API_KEY,
        SYSTEM_ENVIRONMENT=environment,
    )
    fake = FakeChatClient(error=error)
    client = TestClient(create_app(settings=settings, chat_client=fake))
    resp = client.post("/api/chat/detailed", json={"userMessage": "Hi"})
    assert len(fake.prompts) == 1
    return resp


def test_timeout_maps_to_504():
    resp = post_with_error(openai.APITimeoutError(request=REQUEST))

    assert resp.status_code == 504
    body = resp.json()
    assert body["error"] == "Chat Provider Error"
    assert body["details"] == {"error_type": "APITimeoutError"}


def test_connection_error_maps_to_502():
    resp = post_with_error(openai.APIConnectionError(request=REQUEST))

    assert resp.status_code == 502
    assert resp.json()["details"]["error_type"] == "APIConnectionError"


@pytest.mark.parametrize(
    "cls, code",
    [
        (openai.AuthenticationError, 401),
        (openai.RateLimitError, 429),
        (openai.BadRequestError, 400),
        (openai.InternalServerError, 500),
    ],
)
def test_status_errors_map_to_502(cls, code):
    resp = post_with_error(status_error(cls, code, f"Access denied for key {API_KEY}"))

    assert resp.status_code == 502
    body = resp.json()
    assert body["details"]["upstream_status"] == code
    assert str(code) in body["message"]
    assert API_KEY not in resp.text


def test_unexpected_error_maps_to_500_and_redacts_key():
    resp = post_with_error(RuntimeError(f"boom with {API_KEY}"))

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Internal Server Error"
    assert "RuntimeError" in body["message"]
    assert API_KEY not in resp.text
    assert "***REDACTED***" in body["message"]


def test_unexpected_error_hides_details_in_production():
    resp = post_with_error(RuntimeError("boom"), environment="production")

    assert resp.status_code == 500
    assert resp.json() == {
        "error": "Internal Server Error",
        "message": "An internal error occurred. Please try again later.",
    }


def test_simple_chat_provider_error(settings):
    fake = FakeChatClient(error=openai.APIConnectionError(request=REQUEST))
    client = TestClient(create_app(settings=settings, chat_client=fake))

    resp = client.post("/api/chat/simple", content="Hello")

    assert resp.status_code == 502
    assert fake.completed == ["Hello"]
