"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  HTTP routes live in ``api/endpoints``, request and
response records in ``schemas``, business logic in ``services`` and
cross‑cutting concerns (configuration, logging, security, errors) in
``core``.
"""

from .main import app  # noqa: F401
