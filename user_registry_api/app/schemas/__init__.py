"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store so that the API representation
of a user can evolve independently of how records are held in memory.
"""
