"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage records in ``models`` to
decouple API representation from the store.
"""
