"""
Client-side adapter for the WooCommerce Connect server's Stripe account-linking API.
"""

__version__ = "0.3.0"
