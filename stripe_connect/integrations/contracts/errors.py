"""
Error contract for Connect server calls.

Every failure of the request pipeline is one of the ConnectError subclasses below.
They are raised inside the pipeline and RETURNED from the public client methods,
so callers branch on the result type instead of wrapping calls in try/except.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from .interfaces import JsonPayload, RawPayload

SERVER_LABEL = "WooCommerce Connect server"


class ConnectError(Exception):
    """Base error. `str(error)` is the full human-readable text; `message` may be narrower."""

    code = "connect_error"

    def __init__(self, message: str, *, data: Any = None, http_status: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.data = data
        self.http_status = http_status

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, http_status={self.http_status!r}, message={self.message!r})"


# ---------------------------------------------------------------------------
# Request construction failures (no network activity happened)
# ---------------------------------------------------------------------------

class InvalidBodyKind(ConnectError):
    code = "request_body_should_be_array"

    def __init__(self, body: Any = None) -> None:
        super().__init__(
            f"Unable to send request to {SERVER_LABEL}. Body must be an array.",
            data={"body_type": type(body).__name__},
        )


class SerializationError(ConnectError):
    code = "unable_to_json_encode_body"

    def __init__(self, reason: str = "") -> None:
        super().__init__(
            f"Unable to encode body for request to {SERVER_LABEL}.",
            data={"reason": reason} if reason else None,
        )


class HeaderError(ConnectError):
    code = "request_headers_unavailable"

    def __init__(self, reason: str = "") -> None:
        super().__init__(f"Unable to build headers for request to {SERVER_LABEL}. {reason}".strip())


# ---------------------------------------------------------------------------
# Transport failures (no response exists)
# ---------------------------------------------------------------------------

class TransportError(ConnectError):
    code = "http_request_failed"

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause


# ---------------------------------------------------------------------------
# Classified server responses
# ---------------------------------------------------------------------------

class NonJsonErrorResponse(ConnectError):
    code = "wcc_server_error"

    def __init__(self, http_status: int) -> None:
        super().__init__(
            f"Error: The {SERVER_LABEL} returned HTTP code: {http_status}",
            http_status=http_status,
        )


class EmptyErrorResponse(ConnectError):
    code = "wcc_server_empty_response"

    def __init__(self, http_status: int) -> None:
        super().__init__(
            f"Error: The {SERVER_LABEL} returned ( {http_status} ) and an empty response body.",
            http_status=http_status,
        )


class ApiErrorResponse(ConnectError):
    code = "wcc_server_error_response"

    def __init__(self, error: Any = "", message: Any = "", data: Any = None, *, http_status: int) -> None:
        super().__init__(
            f"Error: The {SERVER_LABEL} returned: {error} {message} ( {http_status} )",
            data=data,
            http_status=http_status,
        )
        self.error = error
        self.message = message


ConnectResult = Union[JsonPayload, RawPayload, ConnectError]


def is_error(result: ConnectResult) -> bool:
    return isinstance(result, ConnectError)
