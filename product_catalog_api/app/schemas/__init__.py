"""
Pydantic schema definitions for API payloads.

Request and response records are kept separate from the store so that
the wire representation (for example the camel‑case ``inStock`` key)
stays independent of the service code.
"""
