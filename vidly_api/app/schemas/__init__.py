"""
Pydantic models describing request bodies and responses.

Field names follow the camelCase wire format; document identifiers are
exposed as ``_id`` strings.
"""
