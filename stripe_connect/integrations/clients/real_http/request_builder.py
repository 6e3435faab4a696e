"""
Connect server request builder.

Purpose:
- Resolves the target URL against the configured (or hook-overridden) server URL
- Enriches body-carrying requests with store `settings` defaults
- Serializes the body to UTF-8 JSON and computes negotiation headers

Nothing here touches the network. Failures raise ConnectError subclasses which the
client converts into returned values.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

from stripe_connect.integrations.contracts.errors import HeaderError, InvalidBodyKind, SerializationError
from stripe_connect.integrations.contracts.interfaces import (
    ConnectHooks,
    ConnectRequest,
    HttpMethod,
    PreparedRequest,
    StoreEnvironment,
)
from stripe_connect.integrations.policy.store_profile import default_settings
from stripe_connect.utils.config_loader import ConnectConfig

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def trailingslashit(url: str) -> str:
    return url.rstrip("/\\") + "/"


class RequestBuilder:
    def __init__(
        self,
        config: ConnectConfig,
        environment: StoreEnvironment,
        hooks: Optional[ConnectHooks] = None,
    ) -> None:
        self.config = config
        self.environment = environment
        self.hooks = hooks or ConnectHooks()

    def build(self, request: ConnectRequest) -> PreparedRequest:
        if not isinstance(request.body, Mapping):
            raise InvalidBodyKind(request.body)

        content: Optional[bytes] = None
        if request.method.carries_body:
            content = self.serialize(self.enrich_body(request.body))

        return PreparedRequest(
            method=request.method,
            url=self.resolve_url(request.path),
            headers=self.build_headers(),
            content=content,
        )

    def resolve_url(self, path: str) -> str:
        url = trailingslashit(self.config.server_url)
        if self.hooks.server_url:
            url = self.hooks.server_url(url)
        return trailingslashit(url) + path.lstrip("/")

    def enrich_body(self, initial_body: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Merge caller body over a `{"settings": {}}` skeleton, then fill settings defaults.

        Caller-supplied settings win per key; missing keys come from the store environment.
        """
        body: Dict[str, Any] = {"settings": {}}
        body.update(initial_body)

        settings = body["settings"]
        if settings is None:
            settings = {}
        if not isinstance(settings, Mapping):
            raise InvalidBodyKind(settings)

        merged = default_settings(self.environment)
        merged.update(settings)
        body["settings"] = merged

        if self.hooks.body:
            body = self.hooks.body(body)
        return body

    def serialize(self, body: Mapping[str, Any]) -> bytes:
        try:
            return json.dumps(body, ensure_ascii=False, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            logger.error("Failed to JSON-encode Connect request body: %s", exc)
            raise SerializationError(str(exc)) from exc

    def build_headers(self) -> Dict[str, str]:
        raw_locale = self.environment.site_info().locale
        if not raw_locale:
            raise HeaderError("Site locale is not set.")

        locale = raw_locale.replace("_", "-").lower()
        lang = locale.split("-")[0]
        return {
            "Accept-Language": f"{locale},{lang}",
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": self.config.accept_header,
        }
