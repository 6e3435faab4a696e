"""Pytest fixtures for Connect client tests."""

import json

import httpx
import pytest

from stripe_connect.integrations.clients.mocks import StaticStoreEnvironment
from stripe_connect.integrations.clients.real_http import ConnectAPIClient
from stripe_connect.integrations.contracts.interfaces import CurrentUser, SiteInfo, StoreAddress


@pytest.fixture
def environment():
    """Static store environment with a full address."""
    return StaticStoreEnvironment(
        site=SiteInfo(
            name="Ada&#039;s Shop",
            url="https://shop.example.com",
            locale="pt_BR",
            platform_version="8.5.0",
            runtime_version="6.4.2",
        ),
        user=CurrentUser(first_name="Ada", last_name="Lovelace"),
        address=StoreAddress(
            country="BR",
            state="SP",
            city="Sao Paulo",
            postcode="01000-000",
            street_address="Rua A 1",
        ),
        currency="BRL",
    )


class Recorder:
    def __init__(self, response):
        self.response = response
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if callable(self.response):
            return self.response(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content.decode("utf-8"))


@pytest.fixture
def make_client(environment):
    """Build a client whose network is an httpx.MockTransport returning `response`."""

    def _make(response=None, **kwargs):
        if response is None:
            response = httpx.Response(200, json={"ok": True})
        recorder = Recorder(response)
        client = ConnectAPIClient(
            kwargs.pop("environment", environment),
            transport=httpx.MockTransport(recorder),
            **kwargs,
        )
        return client, recorder

    return _make
