"""
Service layer abstraction.

``user_store`` holds the in‑memory record store; ``user_service``
encapsulates the business logic on top of it.  Swapping the store for a
database‑backed one only requires an object with the same methods.
"""
