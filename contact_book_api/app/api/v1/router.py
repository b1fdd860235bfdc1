"""
Top‑level router for version 1 of the API.

This router aggregates the contact routes and the service info/health
routes.  The application includes it without a version prefix so that
contacts are served at ``/contacts``.
"""

from fastapi import APIRouter

from .endpoints import contacts, health

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
