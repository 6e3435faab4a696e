from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional

import httpx


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def carries_body(self) -> bool:
        return self in {HttpMethod.POST, HttpMethod.PUT}


# ---------------------------------------------------------------------------
# Store environment models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CurrentUser:
    first_name: str = ""
    last_name: str = ""


@dataclass(frozen=True)
class SiteInfo:
    name: str
    url: str
    locale: str = "en_US"
    platform_version: str = ""           # WooCommerce version
    runtime_version: str = ""            # WordPress version


@dataclass(frozen=True)
class BaseLocation:
    country: str = ""
    state: str = ""


@dataclass(frozen=True)
class StoreAddress:
    country: str = ""
    state: str = ""
    city: str = ""
    postcode: str = ""
    street_address: str = ""


# ---------------------------------------------------------------------------
# Request / result models
# ---------------------------------------------------------------------------

@dataclass
class ConnectRequest:
    method: HttpMethod
    path: str
    body: Any = field(default_factory=dict)


@dataclass
class PreparedRequest:
    method: HttpMethod
    url: str
    headers: Dict[str, str]
    content: Optional[bytes] = None


@dataclass(frozen=True)
class JsonPayload:
    """Decoded JSON body of a 200 response."""
    data: Any


@dataclass(frozen=True)
class RawPayload:
    """A 200 response whose content type is not JSON, passed through untouched."""
    response: httpx.Response


# ---------------------------------------------------------------------------
# Extension strategies
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConnectHooks:
    server_url: Optional[Callable[[str], str]] = None
    body: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None
    request_args: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None
    time_limit: Optional[Callable[[float], None]] = None


# ---------------------------------------------------------------------------
# Abstract collaborator interface
# ---------------------------------------------------------------------------

class StoreEnvironment(ABC):
    """Host-provided view of the merchant's store. Every store adapter must implement this."""

    @abstractmethod
    def current_user(self) -> CurrentUser:
        """Return the user currently driving the account-linking flow."""

    @abstractmethod
    def site_info(self) -> SiteInfo:
        """Return site name, URL, locale and version strings."""

    @abstractmethod
    def currency(self) -> str:
        """Return the store's configured currency code."""

    @abstractmethod
    def base_location(self) -> BaseLocation:
        """Return the store base country/state. Always available."""

    def base_address(self) -> Optional[StoreAddress]:
        """Return the full store address, or None when the host cannot supply one."""
        return None

