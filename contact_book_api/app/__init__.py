"""
Application package initializer.

This package contains the entrypoint for the API and its submodules:
``core`` (configuration, logging, database handle, errors),
``schemas`` (request and response models), ``services`` (storage
access) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
