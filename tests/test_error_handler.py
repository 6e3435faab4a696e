import httpx

from stripe_connect.error_handler import ErrorHandler, user_message
from stripe_connect.integrations.contracts.errors import (
    ApiErrorResponse,
    EmptyErrorResponse,
    InvalidBodyKind,
    NonJsonErrorResponse,
    TransportError,
)


def test_handle_exception_returns_payload():
    eh = ErrorHandler()
    out = eh.handle_exception(Exception("boom"), context={"k": "v"})
    assert out["fallback"] is True
    assert "internal error" in out["message"].lower()
    assert "boom" in out["metadata"]["error"]


def test_api_error_message_prefers_server_fields():
    err = ApiErrorResponse("invalid_request", "bad code", {"field": "code"}, http_status=400)
    out = ErrorHandler().handle_error(err, context={"op": "oauth-keys"})

    assert out["message"] == "invalid_request bad code"
    assert out["code"] == "wcc_server_error_response"
    assert out["http_status"] == 400
    assert out["metadata"]["data"] == {"field": "code"}


def test_status_fallback_message():
    assert user_message(EmptyErrorResponse(500)) == "Unexpected status 500"
    assert user_message(NonJsonErrorResponse(404)) == "Unexpected status 404"
    assert user_message(ApiErrorResponse(http_status=418)) == "Unexpected status 418"


def test_errors_without_status_use_own_text():
    assert "Body must be an array" in user_message(InvalidBodyKind([]))
    cause = httpx.ConnectError("dns failure")
    assert user_message(TransportError(cause)) == "dns failure"
