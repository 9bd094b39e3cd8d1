"""
Controller for the configuration health report.

Reports whether the Azure OpenAI settings are present without contacting the
provider. The API key is never shown beyond its first four characters.
"""
from chat_proxy.api.models.health import HealthResponse
from chat_proxy.config.settings import NOT_SET, Settings

# Longest API key prefix that may appear in a health report
API_KEY_PREFIX_LENGTH = 4


def redact_api_key(api_key: str) -> str:
    """Describe an API key by at most its first four characters."""
    if api_key == NOT_SET:
        return NOT_SET
    prefix = api_key[:min(API_KEY_PREFIX_LENGTH, len(api_key))]
    return f"SET (first {API_KEY_PREFIX_LENGTH} chars: {prefix}...)"


class HealthController:
    """Controller for health reporting."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def get_status(self) -> HealthResponse:
        return HealthResponse(
            status="UP",
            endpoint=self.settings.azure_openai_endpoint,
            deployment_name=self.settings.azure_openai_deployment_name,
            api_key_status=redact_api_key(self.settings.azure_openai_api_key),
        )
