"""
API package containing the HTTP routes.

The top‑level ``router`` in ``router.py`` includes every
domain‑specific router defined in ``endpoints``.
"""
