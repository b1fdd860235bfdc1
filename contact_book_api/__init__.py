"""
Top‑level package for the Contact Book API.

This file makes ``contact_book_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``contact_book_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
