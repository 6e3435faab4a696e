"""
Mock integration collaborators.

These return fixed (but realistic) store data without touching a host platform.
They are used when:
- the client runs outside a commerce platform (local development, scripts)
- we want to test the request pipeline end-to-end without a real store

Important:
- Mocks must implement the SAME StoreEnvironment interface a real host adapter does.
"""

from .store_environment import StaticStoreEnvironment

__all__ = ["StaticStoreEnvironment"]
