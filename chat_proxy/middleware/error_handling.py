"""
Error handling middleware.
Maps chat provider and unexpected failures to JSON error responses.
"""
import logging
import traceback
from typing import Callable, Optional

import openai
from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from chat_proxy.config.settings import NOT_SET

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"


def redact_secret(text: str, secret: Optional[str]) -> str:
    """Replace every occurrence of secret in text."""
    if not secret or secret == NOT_SET:
        return text
    return text.replace(secret, REDACTED)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging."""

    def _provider_error(
        self, request: Request, e: Exception, status_code: int, message: str
    ) -> JSONResponse:
        upstream_status = getattr(e, "status_code", None)

        logger.error(
            "Chat provider error",
            extra={
                "path": request.url.path,
                "method": request.method,
                "error_type": type(e).__name__,
                "upstream_status": upstream_status,
            },
        )

        details = {"error_type": type(e).__name__}
        if upstream_status is not None:
            details["upstream_status"] = upstream_status

        return JSONResponse(
            status_code=status_code,
            content={
                "error": "Chat Provider Error",
                "message": message,
                "details": details,
            },
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
            return response

        except openai.APITimeoutError as e:
            return self._provider_error(
                request, e,
                status.HTTP_504_GATEWAY_TIMEOUT,
                "The chat provider did not respond in time.",
            )

        except openai.APIConnectionError as e:
            return self._provider_error(
                request, e,
                status.HTTP_502_BAD_GATEWAY,
                "Could not connect to the chat provider.",
            )

        except openai.APIStatusError as e:
            return self._provider_error(
                request, e,
                status.HTTP_502_BAD_GATEWAY,
                f"The chat provider rejected the request with status {e.status_code}.",
            )

        except openai.OpenAIError as e:
            return self._provider_error(
                request, e,
                status.HTTP_502_BAD_GATEWAY,
                "The chat provider returned an invalid response.",
            )

        except Exception as e:
            settings = request.app.state.settings
            api_key = settings.azure_openai_api_key

            tb_str = redact_secret(traceback.format_exc(), api_key)

            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error_type": type(e).__name__,
                    "traceback": tb_str if not settings.is_production else None,
                },
            )

            # Don't expose internal errors in production
            if settings.is_production:
                message = "An internal error occurred. Please try again later."
            else:
                message = redact_secret(f"{type(e).__name__}: {str(e)}", api_key)

            response_content = {
                "error": "Internal Server Error",
                "message": message,
            }

            if not settings.is_production:
                response_content["details"] = {"traceback": tb_str}

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=response_content,
            )
