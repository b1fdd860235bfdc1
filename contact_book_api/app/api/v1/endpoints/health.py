"""Service info and health check routes"""

import asyncio
from typing import Any, Dict

from fastapi import APIRouter, Depends

from contact_book_api.app.core.config import Settings, get_settings
from contact_book_api.app.core.db import Database, get_database
from contact_book_api.app.core.exceptions import StorageError

router = APIRouter()


@router.get("/")
async def root(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    """Root endpoint - service info"""
    return {
        "service": settings.project_name,
        "version": settings.api_version,
        "status": "running",
        "docs": "/docs",
    }


@router.get("/health")
async def health_check(db: Database = Depends(get_database)) -> Dict[str, Any]:
    """Report whether the contacts table is reachable.

    Always answers 200; a failing store turns ``status`` into
    ``degraded``.
    """
    health: Dict[str, Any] = {"status": "healthy", "database": False}
    try:
        await asyncio.to_thread(db.ping)
        health["database"] = True
    except StorageError as exc:
        health["status"] = "degraded"
        health["database_error"] = exc.message
    return health
