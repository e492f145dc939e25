"""
Pydantic schema definitions for API payloads.

Schemas describe what the HTTP layer accepts and returns.  They are
kept apart from the storage gateway, which deals in plain dicts, so the
API representation is decoupled from the DynamoDB item layout.
"""
