"""
Application package initializer.

The project is organised into logical pieces: domain entities in
``models``, in-memory storage in ``core.store``, business logic in
``services``, Pydantic schemas in ``schemas`` and versioned HTTP routes
under ``api/<version>/``.
"""

from .main import app  # noqa: F401
