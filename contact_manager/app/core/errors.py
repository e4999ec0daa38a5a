"""
Error types raised by the contact store.

``StoreError`` covers unexpected persistence failures.  Its subclass
``ValidationError`` is raised when a record is missing a required
field or carries a malformed email address; it is attributable to the
caller rather than to the server.
"""

from typing import Dict


class StoreError(Exception):
    """Unexpected failure while reading or writing contacts."""


class ValidationError(StoreError):
    """A contact record failed field validation.

    ``errors`` maps each offending field name to its message.  The
    exception message joins them in field order, e.g.
    ``"Contact validation failed: name: Name is required"``.
    """

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = dict(errors)
        details = ", ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(f"Contact validation failed: {details}")
