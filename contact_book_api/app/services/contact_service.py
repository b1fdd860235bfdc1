"""
Service layer for contacts.

This module provides the list, get, create and delete operations over
the ``contacts`` table.  Each operation validates its input, then runs
the blocking SQLite work in a worker thread via ``asyncio.to_thread``
so the event loop keeps dispatching other requests meanwhile.

All queries use parameterized statements.  Storage failures surface as
``StorageError`` from ``Database.cursor()``.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from typing import List

from contact_book_api.app.core.db import Database
from contact_book_api.app.core.exceptions import NotFoundError
from contact_book_api.app.core.validators import MAX_ID, validate_contact_fields
from contact_book_api.app.schemas.contact import ContactCreate, ContactDeleted, ContactRead


logger = logging.getLogger(__name__)


class ContactService:
    """Service class for managing contacts."""

    @classmethod
    async def list_contacts(cls, db: Database, page: int = 1, limit: int = 10) -> List[ContactRead]:
        """Return one page of contacts ordered by id."""
        offset = (page - 1) * limit
        if offset > MAX_ID:
            # Past any row the table can hold.
            return []

        def fetch() -> List[sqlite3.Row]:
            with db.cursor() as cursor:
                return cursor.execute(
                    "SELECT id, name, email, phone FROM contacts ORDER BY id ASC LIMIT ? OFFSET ?",
                    (limit, offset),
                ).fetchall()

        rows = await asyncio.to_thread(fetch)
        return [cls._row_to_contact_read(row) for row in rows]

    @classmethod
    async def get_contact(cls, db: Database, contact_id: int) -> ContactRead:
        """Retrieve a single contact; raises ``NotFoundError`` if absent."""

        def fetch() -> sqlite3.Row | None:
            with db.cursor() as cursor:
                return cursor.execute(
                    "SELECT id, name, email, phone FROM contacts WHERE id = ?",
                    (contact_id,),
                ).fetchone()

        row = await asyncio.to_thread(fetch)
        if row is None:
            raise NotFoundError("Contact not found")
        return cls._row_to_contact_read(row)

    @classmethod
    async def create_contact(cls, db: Database, data: ContactCreate) -> ContactRead:
        """Validate and insert a new contact, returning it with its new id.

        Checks run in a fixed order (required fields, email, phone) and
        the first failure is reported.
        """
        validate_contact_fields(data.name, data.email, data.phone)

        def insert() -> int:
            with db.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO contacts (name, email, phone) VALUES (?, ?, ?)",
                    (data.name, data.email, data.phone),
                )
                return cursor.lastrowid

        contact_id = await asyncio.to_thread(insert)
        logger.info("Created contact %s", contact_id)
        return ContactRead(id=contact_id, name=data.name, email=data.email, phone=data.phone)

    @classmethod
    async def delete_contact(cls, db: Database, contact_id: int) -> ContactDeleted:
        """Delete a contact by id.

        Raises ``NotFoundError`` carrying ``changes: 0`` when no row
        matched.
        """

        def delete() -> int:
            with db.cursor() as cursor:
                cursor.execute("DELETE FROM contacts WHERE id = ?", (contact_id,))
                return cursor.rowcount

        changes = await asyncio.to_thread(delete)
        if changes == 0:
            raise NotFoundError("Contact not found", extra={"changes": 0})
        logger.info("Deleted contact %s", contact_id)
        return ContactDeleted(changes=changes)

    @staticmethod
    def _row_to_contact_read(row: sqlite3.Row) -> ContactRead:
        return ContactRead(id=row["id"], name=row["name"], email=row["email"], phone=row["phone"])
