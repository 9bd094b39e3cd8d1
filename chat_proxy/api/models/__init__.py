from .chat import ChatRequest
from .error import ErrorResponse
from .health import HealthResponse

__all__ = [
    "ErrorResponse",
    "ChatRequest",
    "HealthResponse",
]
