"""
Contracts (data models).

This folder defines the request/response shapes for the Connect server integration:
- store environment inputs (current user, site metadata, store address)
- result types returned by the request pipeline
- the typed error values every public call may return

Both the real HTTP client and the mock collaborators use these contracts.
"""
