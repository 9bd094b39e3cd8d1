"""
Health check endpoint.
Reports configuration presence; never contacts the chat provider.
"""
from fastapi import APIRouter, Depends

from chat_proxy.api.models import HealthResponse
from chat_proxy.config.settings import Settings, get_settings
from chat_proxy.controllers.health_controller import HealthController

router = APIRouter(tags=["health"])


def get_health_controller(settings: Settings = Depends(get_settings)) -> HealthController:
    """Dependency injection for HealthController."""
    return HealthController(settings)


@router.get("/health", response_model=HealthResponse)
async def health_check(controller: HealthController = Depends(get_health_controller)):
    """Basic health check endpoint."""
    return controller.get_status()
