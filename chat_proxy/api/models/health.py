from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Configuration presence report returned by GET /health."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    status: str
    endpoint: str
    deployment_name: str = Field(alias="deploymentName")
    api_key_status: str = Field(alias="apiKeyStatus")
