"""
Application package.

Layers, from the HTTP edge inwards: ``api`` (routers and endpoints),
``schemas`` (request/response bodies), ``services`` (business rules),
``repositories`` (SQL) and ``models`` (validated domain objects).
``core`` holds configuration, logging, the database helpers and the
error types shared by all layers.
"""

from .main import app  # noqa: F401
