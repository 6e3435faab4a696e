from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

from stripe_connect.integrations.contracts.errors import ConnectResult
from stripe_connect.integrations.contracts.interfaces import JsonPayload


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.payload = payload if payload is not None else {}


class OAuthInitResponseModel(BaseModel):
    oauth_url: str
    state: str = ""
    raw: Dict[str, Any] = Field(default_factory=dict)


class OAuthKeysResponseModel(BaseModel):
    account_id: str
    publishable_key: str
    secret_key: str
    raw: Dict[str, Any] = Field(default_factory=dict)


def normalize_oauth_init_response(result: ConnectResult) -> OAuthInitResponseModel:
    raw = _json_object(result, "OAuth init")
    oauth_url = str(_first_non_empty(raw, "oauthUrl", "oauth_url", "url"))
    if not oauth_url.startswith(("http://", "https://")):
        raise IntegrationResponseError(f"OAuth init returned a non-HTTP URL: {oauth_url!r}", payload=raw)

    return _build_model(
        OAuthInitResponseModel,
        {
            "oauth_url": oauth_url,
            "state": str(_first_non_empty(raw, "state", default="")),
            "raw": raw,
        },
        raw,
    )


def normalize_oauth_keys_response(result: ConnectResult) -> OAuthKeysResponseModel:
    raw = _json_object(result, "OAuth keys")
    publishable_key = str(_first_non_empty(raw, "publishableKey", "publishable_key"))
    secret_key = str(_first_non_empty(raw, "secretKey", "secret_key"))

    if not publishable_key.startswith("pk_"):
        raise IntegrationResponseError("OAuth keys response has a malformed publishable key.", payload=raw)
    if not secret_key.startswith(("sk_", "rk_")):
        raise IntegrationResponseError("OAuth keys response has a malformed secret key.", payload=raw)

    return _build_model(
        OAuthKeysResponseModel,
        {
            "account_id": str(_first_non_empty(raw, "accountId", "account_id")),
            "publishable_key": publishable_key,
            "secret_key": secret_key,
            "raw": raw,
        },
        raw,
    )


def _json_object(result: ConnectResult, label: str) -> Dict[str, Any]:
    if not isinstance(result, JsonPayload):
        raise IntegrationResponseError(f"{label} did not return a JSON payload (got {type(result).__name__}).")
    if not isinstance(result.data, dict):
        raise IntegrationResponseError(f"{label} returned a non-object JSON payload.", payload=result.data)
    return result.data


def _first_non_empty(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    if default is not None:
        return default
    raise IntegrationResponseError(f"Missing required field. Checked keys: {', '.join(keys)}", payload=data)


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any]):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=raw) from exc
