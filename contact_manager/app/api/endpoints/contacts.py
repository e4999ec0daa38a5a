"""
Contact endpoints.

These routes expose list, create and delete operations over the
contact store.  Error bodies always have the shape
``{"message": "..."}`` so that clients can display them directly.

Create failures are reported as 400 whether they come from field
validation or from the store itself; list and delete failures are
reported as 500.  Deleting an unknown ID is a 404, not an error.
"""

import logging
from typing import List

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from contact_manager.app.core.errors import ValidationError
from contact_manager.app.schemas.contact import (
    ContactCreate,
    ContactDeleted,
    ContactRead,
    ErrorMessage,
)
from contact_manager.app.services.contact_service import ContactService

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.get(
    "",
    response_model=List[ContactRead],
    responses={500: {"model": ErrorMessage}},
)
def list_contacts():
    """Return every contact, newest first."""
    try:
        return ContactService.list_all()
    except Exception as exc:
        logger.exception("Failed to list contacts")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


@router.post(
    "",
    response_model=ContactRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorMessage}},
)
def create_contact(contact_in: ContactCreate):
    """Create a contact from ``name``, ``email``, ``phone`` and optional ``message``."""
    try:
        return ContactService.insert(contact_in)
    except ValidationError as exc:
        logger.warning("Rejected contact: %s", exc)
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except Exception as exc:
        logger.exception("Failed to create contact")
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))


@router.delete(
    "/{contact_id}",
    response_model=ContactDeleted,
    responses={404: {"model": ErrorMessage}, 500: {"model": ErrorMessage}},
)
def delete_contact(contact_id: str):
    """Delete a contact and echo its ID.

    Returns HTTP 404 if no contact has that ID.
    """
    try:
        deleted = ContactService.delete_by_id(contact_id)
    except Exception as exc:
        logger.exception("Failed to delete contact %s", contact_id)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
    if not deleted:
        return _error(status.HTTP_404_NOT_FOUND, "Contact not found")
    return ContactDeleted(id=contact_id)
