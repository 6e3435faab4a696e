"""
Real Connect server HTTP client.

Purpose:
- Dispatches requests built by RequestBuilder with httpx
- Classifies each response into a JSON payload, a raw pass-through response,
  or one of the ConnectError kinds
- Exposes the Stripe account operations as thin callers into that pipeline

Usage:
- Construct once per host with a StoreEnvironment and a ConnectConfig; the client holds
  no mutable state, so one instance can serve concurrent callers.
- Each operation performs exactly one HTTP call. No retries happen here.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from stripe_connect.integrations.contracts.errors import (
    ApiErrorResponse,
    ConnectError,
    ConnectResult,
    EmptyErrorResponse,
    NonJsonErrorResponse,
    TransportError,
)
from stripe_connect.integrations.contracts.interfaces import (
    ConnectHooks,
    ConnectRequest,
    HttpMethod,
    JsonPayload,
    PreparedRequest,
    RawPayload,
    StoreEnvironment,
)
from stripe_connect.integrations.policy.store_profile import build_business_data
from stripe_connect.utils.config_loader import ConnectConfig

from .request_builder import RequestBuilder

logger = logging.getLogger(__name__)


class ConnectAPIClient:
    def __init__(
        self,
        environment: StoreEnvironment,
        config: Optional[ConnectConfig] = None,
        hooks: Optional[ConnectHooks] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.environment = environment
        self.config = config or ConnectConfig()
        self.hooks = hooks or ConnectHooks()
        self.builder = RequestBuilder(self.config, environment, self.hooks)
        self._transport = transport

    # -- Stripe account operations --

    async def get_account_details(self) -> ConnectResult:
        return await self.request("GET", "/stripe/account")

    async def initiate_oauth(self, return_url: str, business_data: Optional[Dict[str, Any]] = None) -> ConnectResult:
        """Ask the Connect server for a Stripe OAuth URL; business data defaults to the store profile."""
        if business_data is None:
            business_data = build_business_data(self.environment)
        body = {
            "returnUrl": return_url,
            "businessData": business_data,
        }
        return await self.request("POST", "/stripe/oauth-init", body)

    async def exchange_oauth_code(self, code: str) -> ConnectResult:
        return await self.request("POST", "/stripe/oauth-keys", {"code": code})

    async def deauthorize(self) -> ConnectResult:
        return await self.request("POST", "/stripe/account/deauthorize")

    # -- Pipeline --

    async def request(self, method: Union[str, HttpMethod], path: str, body: Any = None) -> ConnectResult:
        connect_request = ConnectRequest(
            method=HttpMethod(method),
            path=path,
            body={} if body is None else body,
        )
        try:
            prepared = self.builder.build(connect_request)
            response = await self.dispatch(prepared)
            return self.classify(response)
        except ConnectError as error:
            logger.info("Connect %s %s failed: [%s] %s", connect_request.method.value, path, error.code, error)
            return error

    async def dispatch(self, prepared: PreparedRequest) -> httpx.Response:
        timeout = self.config.timeout_seconds
        if self.hooks.time_limit:
            self.hooks.time_limit(timeout + self.config.time_limit_margin_seconds)

        args: Dict[str, Any] = {
            "method": prepared.method.value,
            "headers": prepared.headers,
            "content": prepared.content,
            "follow_redirects": False,
            "timeout": timeout,
        }
        if self.hooks.request_args:
            args = self.hooks.request_args(args)

        logger.debug("Connect request: %s %s", args["method"], prepared.url)
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                return await client.request(url=prepared.url, **args)
        except httpx.RequestError as exc:
            logger.error("Connect server request to %s failed: %s", prepared.url, exc)
            raise TransportError(exc) from exc

    def classify(self, response: httpx.Response) -> Union[JsonPayload, RawPayload]:
        status = response.status_code
        content_type = response.headers.get("content-type", "")

        if "application/json" not in content_type:
            if status != 200:
                raise NonJsonErrorResponse(status)
            return RawPayload(response)

        decoded = self._decode(response)

        if status != 200:
            if _is_empty_body(decoded):
                raise EmptyErrorResponse(status)
            fields: Mapping[str, Any] = decoded if isinstance(decoded, Mapping) else {}
            raise ApiErrorResponse(
                fields.get("error", ""),
                fields.get("message", ""),
                fields.get("data"),
                http_status=status,
            )

        return JsonPayload(decoded)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("Connect server sent undecodable JSON (status %s): %s", response.status_code, exc)
            return None


def _is_empty_body(decoded: Any) -> bool:
    # A decoded empty object still counts as a body.
    if isinstance(decoded, Mapping):
        return False
    return not decoded or decoded == "0"
