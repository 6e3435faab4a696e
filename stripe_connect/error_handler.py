"""Error reporting helpers for Connect server calls."""
from typing import Any, Dict
import logging

from stripe_connect.integrations.contracts.errors import ApiErrorResponse, ConnectError

logger = logging.getLogger(__name__)


def user_message(error: ConnectError) -> str:
    if isinstance(error, ApiErrorResponse):
        text = " ".join(str(part) for part in (error.error, error.message) if part).strip()
        if text:
            return text
    if error.http_status is not None:
        return f"Unexpected status {error.http_status}"
    return str(error)


class ErrorHandler:
    def handle_error(self, error: ConnectError, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.warning("Connect server call failed [%s]: %s", error.code, error)
        return {
            "message": user_message(error),
            "code": error.code,
            "http_status": error.http_status,
            "fallback": False,
            "metadata": {"data": error.data, "context": context or {}},
        }

    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception in Connect client: %s", exc, exc_info=True)
        return {
            "message": "An internal error occurred while contacting the Connect server. Please try again later.",
            "code": "internal_error",
            "http_status": None,
            "fallback": True,
            "metadata": {"error": str(exc), "context": context or {}},
        }
