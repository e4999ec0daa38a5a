"""
Pydantic schemas for contacts.

``ContactCreate`` deliberately types every field as optional: the
required-field and email checks belong to the store, which reports
them as a single ``ValidationError`` with per-field messages.  The
read model uses the camelCase timestamp names of the JSON contract.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ContactCreate(BaseModel):
    """Schema for creating a contact."""

    name: Optional[str] = Field(None, examples=["Ada Lovelace"])
    email: Optional[str] = Field(None, examples=["ada@example.com"])
    phone: Optional[str] = Field(None, examples=["+1 234 567 890"])
    message: Optional[str] = Field(None, examples=["Met at the analytical engine demo"])


class ContactRead(BaseModel):
    """Schema for a stored contact."""

    id: str
    name: str
    email: str
    phone: str
    message: Optional[str] = None
    createdAt: str
    updatedAt: str


class ContactDeleted(BaseModel):
    id: str


class ErrorMessage(BaseModel):
    message: str
