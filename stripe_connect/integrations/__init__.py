"""
Integrations layer.
This package contains all code used to communicate with the WooCommerce Connect server,
which brokers the Stripe OAuth handshake and account operations.

Key rule:
- Host code MUST NOT call the Connect server directly.
- It should go through ConnectAPIClient (under stripe_connect/integrations/clients/real_http).
- Store data reaches the client only through a StoreEnvironment implementation.
"""

from .clients.real_http import ConnectAPIClient, RequestBuilder
from .contracts.errors import (
    ApiErrorResponse,
    ConnectError,
    ConnectResult,
    EmptyErrorResponse,
    HeaderError,
    InvalidBodyKind,
    NonJsonErrorResponse,
    SerializationError,
    TransportError,
    is_error,
)
from .contracts.interfaces import (
    BaseLocation,
    ConnectHooks,
    ConnectRequest,
    CurrentUser,
    HttpMethod,
    JsonPayload,
    PreparedRequest,
    RawPayload,
    SiteInfo,
    StoreAddress,
    StoreEnvironment,
)

__all__ = [
    # clients
    "ConnectAPIClient", "RequestBuilder",
    # errors
    "ApiErrorResponse", "ConnectError", "ConnectResult", "EmptyErrorResponse",
    "HeaderError", "InvalidBodyKind", "NonJsonErrorResponse", "SerializationError",
    "TransportError", "is_error",
    # interfaces
    "BaseLocation", "ConnectHooks", "ConnectRequest", "CurrentUser", "HttpMethod",
    "JsonPayload", "PreparedRequest", "RawPayload", "SiteInfo", "StoreAddress",
    "StoreEnvironment",
]
