"""
Contact endpoints for API v1.

These routes expose list, get, create and delete operations for
contacts.  There is no authentication and no update operation.  Query
and path parameters are declared as strings and parsed explicitly so
that malformed values produce the service's own 400 responses.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from contact_book_api.app.core.config import Settings, get_settings
from contact_book_api.app.core.db import Database, get_database
from contact_book_api.app.core.validators import parse_contact_id, parse_positive_int
from contact_book_api.app.schemas.contact import (
    ContactCreate,
    ContactDeleted,
    ContactRead,
    ErrorResponse,
)
from contact_book_api.app.services.contact_service import ContactService

router = APIRouter()

_ERRORS = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("", response_model=List[ContactRead], responses=_ERRORS)
async def list_contacts(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    db: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> List[ContactRead]:
    """Return a page of contacts ordered by id.

    ``page`` defaults to 1 and ``limit`` to the configured page size;
    both must be positive integers and ``limit`` is capped by
    ``MAX_PAGE_SIZE``.
    """
    return await ContactService.list_contacts(
        db,
        page=parse_positive_int(page, "page", default=1),
        limit=parse_positive_int(
            limit,
            "limit",
            default=settings.default_page_size,
            maximum=settings.max_page_size,
        ),
    )


@router.get("/{contact_id}", response_model=ContactRead, responses={404: {"model": ErrorResponse}, **_ERRORS})
async def get_contact(contact_id: str, db: Database = Depends(get_database)) -> ContactRead:
    """Retrieve a single contact by id."""
    return await ContactService.get_contact(db, parse_contact_id(contact_id))


@router.post("", response_model=ContactRead, responses=_ERRORS)
async def create_contact(contact_in: ContactCreate, db: Database = Depends(get_database)) -> ContactRead:
    """Create a new contact.

    Responds 200 with the stored record, including its new id.
    """
    return await ContactService.create_contact(db, contact_in)


@router.delete("/{contact_id}", response_model=ContactDeleted, responses={404: {"model": ErrorResponse}, **_ERRORS})
async def delete_contact(contact_id: str, db: Database = Depends(get_database)) -> ContactDeleted:
    """Delete a contact permanently."""
    return await ContactService.delete_contact(db, parse_contact_id(contact_id))
