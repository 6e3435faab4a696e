"""
Static store environment: MOCK collaborator.

⚠️  This is a fixed-value implementation for development and testing.
    A real host (the commerce platform) supplies its own StoreEnvironment that reads
    the current user, site settings and store address from the platform.
    Set full_address_available=False to exercise the reduced-address fallback.
"""

import logging
from typing import Optional

from stripe_connect.integrations.contracts.interfaces import (
    BaseLocation,
    CurrentUser,
    SiteInfo,
    StoreAddress,
    StoreEnvironment,
)
from stripe_connect.utils.config_loader import StoreConfig

logger = logging.getLogger(__name__)


class StaticStoreEnvironment(StoreEnvironment):
    def __init__(
        self,
        site: SiteInfo,
        user: Optional[CurrentUser] = None,
        address: Optional[StoreAddress] = None,
        currency: str = "USD",
        full_address_available: bool = True,
    ) -> None:
        self._site = site
        self._user = user or CurrentUser()
        self._address = address or StoreAddress()
        self._currency = currency
        self._full_address_available = full_address_available

    @classmethod
    def from_config(cls, store: StoreConfig) -> "StaticStoreEnvironment":
        logger.info("Using static store environment for %s", store.site_url or "<unset site url>")
        return cls(
            site=SiteInfo(
                name=store.site_name,
                url=store.site_url,
                locale=store.locale,
                platform_version=store.platform_version,
                runtime_version=store.runtime_version,
            ),
            user=CurrentUser(first_name=store.first_name, last_name=store.last_name),
            address=StoreAddress(
                country=store.country,
                state=store.state,
                city=store.city,
                postcode=store.postcode,
                street_address=store.street_address,
            ),
            currency=store.currency,
            full_address_available=store.full_address_available,
        )

    def current_user(self) -> CurrentUser:
        return self._user

    def site_info(self) -> SiteInfo:
        return self._site

    def currency(self) -> str:
        return self._currency

    def base_location(self) -> BaseLocation:
        return BaseLocation(country=self._address.country, state=self._address.state)

    def base_address(self) -> Optional[StoreAddress]:
        if not self._full_address_available:
            return None
        return self._address
