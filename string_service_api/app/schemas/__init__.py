"""
Pydantic schema definitions for API payloads.

Field names match the JSON wire format (``s`` for input, ``v`` for the
result and ``err`` for the embedded business error).
"""
