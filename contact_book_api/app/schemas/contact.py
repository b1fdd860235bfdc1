"""
Pydantic schemas for contacts.

A contact is a name, an email address and a ten digit phone number
identified by a store‑assigned integer id.  ``ContactCreate`` accepts
missing fields so that the service can report them with its own
messages in a fixed order (see ``core.validators``).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ContactCreate(BaseModel):
    """Schema for creating a new contact."""

    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address")
    phone: Optional[str] = Field(None, description="Phone number, exactly 10 digits")


class ContactRead(BaseModel):
    """Schema for reading a contact."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str


class ContactDeleted(BaseModel):
    """Result of a successful delete: how many rows were removed."""

    message: str = "Contact deleted"
    changes: int


class ErrorResponse(BaseModel):
    """Body of every 4xx and 5xx response."""

    error: str
