"""
Service layer abstraction.

Services encapsulate business logic on top of the store.  Swapping the
in‑memory store for a database would only touch the store and the
service, never the API handlers.
"""
