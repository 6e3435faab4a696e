"""
Store profile assembly.

Turns a host StoreEnvironment into the two payload fragments the Connect server expects:
- `businessData` sent once during OAuth initiation
- the `settings` defaults merged into every request body
"""

from __future__ import annotations

import html
import logging
from typing import Any, Dict

from stripe_connect import __version__
from stripe_connect.integrations.contracts.interfaces import StoreAddress, StoreEnvironment

logger = logging.getLogger(__name__)

SETTINGS_KEYS = (
    "base_city",
    "base_country",
    "base_state",
    "base_postcode",
    "currency",
    "stripe_version",
    "wc_version",
    "wp_version",
)


def resolve_store_address(environment: StoreEnvironment) -> StoreAddress:
    """
    Return the richest store address the host can provide.

    Hosts without a full address API only know the base country/state. City, postcode and
    street are then sent as empty strings; that is a known data-quality gap, not a valid
    address, so it is logged instead of failing the request.
    """
    address = environment.base_address()
    if address is not None:
        return address

    location = environment.base_location()
    logger.warning(
        "Full store address unavailable; sending country=%r state=%r with empty city/postcode/street",
        location.country,
        location.state,
    )
    return StoreAddress(country=location.country, state=location.state)


def build_business_data(environment: StoreEnvironment) -> Dict[str, Any]:
    user = environment.current_user()
    site = environment.site_info()
    address = resolve_store_address(environment)

    return {
        "url": site.url,
        "business_name": html.unescape(site.name),
        "first_name": user.first_name,
        "last_name": user.last_name,
        "phone": "",
        "currency": environment.currency(),
        "country": address.country,
        "street_address": address.street_address,
        "city": address.city,
        "state": address.state,
        "zip": address.postcode,
    }


def default_settings(environment: StoreEnvironment) -> Dict[str, Any]:
    site = environment.site_info()
    address = resolve_store_address(environment)

    return {
        "base_city": address.city,
        "base_country": address.country,
        "base_state": address.state,
        "base_postcode": address.postcode,
        "currency": environment.currency(),
        "stripe_version": __version__,
        "wc_version": site.platform_version,
        "wp_version": site.runtime_version,
    }
