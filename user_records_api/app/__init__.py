"""
Application package initializer.

The package is split into ``core`` (configuration, logging, exceptions
and the DynamoDB storage gateway), ``schemas`` (request/response
models), ``services`` (request-level logic) and ``api`` (FastAPI
routers).  ``main`` wires them together.
"""

from .main import app  # noqa: F401
