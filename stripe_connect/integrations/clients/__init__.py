"""
Integration clients.

- real_http: talks to the Connect server over HTTP
- mocks: fixed-value collaborators for development and tests
"""
