"""
Policy helpers shared by the Connect client and its callers:
- store_profile: business data and settings defaults derived from the store
- response_wrappers: typed views over known success payloads
"""
