"""
Real HTTP integration clients.

These clients communicate with the WooCommerce Connect server via HTTP:
- request_builder: URL resolution, settings enrichment, serialization, headers
- connect_api: dispatch, response classification, public account operations

Important:
- Must return data shaped according to stripe_connect/integrations/contracts/*
- Every pipeline failure is RETURNED as a ConnectError value, never raised to callers
"""

from .connect_api import ConnectAPIClient
from .request_builder import RequestBuilder

__all__ = ["ConnectAPIClient", "RequestBuilder"]
