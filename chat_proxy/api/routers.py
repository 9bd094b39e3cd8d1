from fastapi import APIRouter

from .endpoints import chat
from .endpoints import health

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(chat.router, prefix="", tags=["chat"])

# Health lives at the application root, outside the /api prefix
health_router = health.router
