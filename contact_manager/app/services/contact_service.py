"""
Service layer for contacts.

This module is the contact store: it validates incoming records,
assigns identifiers and timestamps, and persists them in the
``contacts`` table.  Three operations are exposed:

* :meth:`ContactService.insert` validates and stores a new contact.
* :meth:`ContactService.list_all` returns every contact, newest first.
* :meth:`ContactService.delete_by_id` removes a contact and reports
  whether it existed.

There is no update operation; ``updated_at`` therefore always equals
``created_at``.  Each operation runs on its own connection and commits
once, so single-record writes are atomic.

All queries use parameterized statements.  ``sqlite3`` failures are
re-raised as :class:`StoreError` so the API layer can map them without
knowing the storage engine.
"""

from __future__ import annotations

import logging
import re
import secrets
import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

from contact_manager.app.core.db import get_cursor
from contact_manager.app.core.errors import StoreError, ValidationError
from contact_manager.app.schemas.contact import ContactCreate, ContactRead

logger = logging.getLogger(__name__)

# Same loose shape the web form checks: something@something.something
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

REQUIRED_MESSAGES = {
    "name": "Name is required",
    "email": "Email is required",
    "phone": "Phone is required",
}
INVALID_EMAIL_MESSAGE = "Please use a valid email address"


def _now_iso() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _new_id() -> str:
    return secrets.token_hex(12)


def validate_contact(record: Mapping[str, Any]) -> None:
    """Raise :class:`ValidationError` if ``record`` cannot be stored.

    ``name``, ``email`` and ``phone`` must be non-empty strings and
    ``email`` must contain ``<local>@<domain>.<tld>``.  All failing
    fields are reported at once.
    """
    errors: Dict[str, str] = {}
    for field, msg in REQUIRED_MESSAGES.items():
        value = record.get(field)
        if not isinstance(value, str) or value == "":
            errors[field] = msg
    if "email" not in errors and not EMAIL_PATTERN.search(record["email"]):
        errors["email"] = INVALID_EMAIL_MESSAGE
    message = record.get("message")
    if message is not None and not isinstance(message, str):
        errors["message"] = "Message must be text"
    if errors:
        raise ValidationError(errors)


class ContactService:
    """Service class for managing contacts."""

    @classmethod
    def insert(cls, data: ContactCreate | Mapping[str, Any]) -> ContactRead:
        """Validate and store a new contact and return the stored record.

        ``data`` may be a :class:`ContactCreate` or a plain mapping.
        Any ``id`` or timestamp it carries is ignored; the store always
        assigns fresh ones.
        """
        record = data.model_dump() if isinstance(data, ContactCreate) else dict(data)
        validate_contact(record)

        contact_id = _new_id()
        now = _now_iso()
        try:
            with get_cursor() as cursor:
                cursor.execute(
                    """
                    INSERT INTO contacts (id, name, email, phone, message, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        contact_id,
                        record["name"],
                        record["email"],
                        record["phone"],
                        record.get("message"),
                        now,
                        now,
                    ),
                )
                row = cursor.execute(
                    "SELECT * FROM contacts WHERE id = ?", (contact_id,)
                ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        logger.info("Created contact %s", contact_id)
        return cls._row_to_contact_read(row)

    @classmethod
    def list_all(cls) -> List[ContactRead]:
        """Return all contacts ordered by creation time, newest first.

        Contacts created within the same millisecond are ordered by
        insertion, later insertions first.
        """
        try:
            with get_cursor() as cursor:
                rows = cursor.execute(
                    "SELECT * FROM contacts ORDER BY created_at DESC, seq DESC"
                ).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return [cls._row_to_contact_read(row) for row in rows]

    @classmethod
    def delete_by_id(cls, contact_id: str) -> bool:
        """Delete a contact by ID.

        Returns ``True`` if a record was deleted, ``False`` if no
        contact has that ID.
        """
        try:
            with get_cursor() as cursor:
                cursor.execute("DELETE FROM contacts WHERE id = ?", (contact_id,))
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        if affected:
            logger.info("Deleted contact %s", contact_id)
        return affected > 0

    @staticmethod
    def _row_to_contact_read(row: sqlite3.Row) -> ContactRead:
        """Convert a database row to a ContactRead schema instance."""
        return ContactRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            phone=row["phone"],
            message=row["message"],
            createdAt=row["created_at"],
            updatedAt=row["updated_at"],
        )
