"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: configuration and logging in ``core``, the persisted
record type in ``models``, storage backends in ``stores``, business
logic in ``services``, request/response payloads in ``schemas`` and
the HTTP routes under ``api/<version>/``.
"""

from .main import app  # noqa: F401
