"""State holder for the contact form and list.

``ContactForm`` owns everything the front end displays: the loaded
contacts, the four form fields, per-field validation errors and a
``is_submitting`` flag.  It does no rendering; a front end such as
:mod:`contacts_console` reads its attributes and calls its methods.

Failed network calls never raise.  They are logged and handed to the
optional ``on_error`` callback, which a front end may use to show them.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, List, Optional

from contacts_client import ContactsAPI


logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

FIELDS = ("name", "email", "phone", "message")

DELETE_PROMPT = "Are you sure you want to delete this contact?"


def empty_form() -> Dict[str, str]:
    return {field: "" for field in FIELDS}


class ContactForm:
    """Controller for the add-contact form and the contact list."""

    def __init__(
        self,
        api: ContactsAPI,
        *,
        confirm: Callable[[str], bool],
        on_error: Optional[Callable[[Dict[str, Any]], None]] = None,
    ) -> None:
        """
        Args:
            api: Client used for every network call.
            confirm: Asked before each deletion; returning ``False``
                cancels it.
            on_error: Receives the ``error`` dict of any failed call.
        """
        self.api = api
        self.confirm = confirm
        self.on_error = on_error
        self.contacts: List[Dict[str, Any]] = []
        self.form: Dict[str, str] = empty_form()
        self.errors: Dict[str, str] = {}
        self.is_submitting = False

    def _report(self, action: str, error: Dict[str, Any]) -> None:
        logger.error("Failed to %s: %s", action, error.get("message"))
        if self.on_error is not None:
            self.on_error(error)

    def load(self) -> None:
        """Fetch the contact list and reset the form fields."""
        contacts, error = self.api.list_contacts()
        if error:
            self._report("load contacts", error)
        else:
            self.contacts = contacts
        self.form = empty_form()

    def change(self, field: str, value: str) -> None:
        """Set a form field and clear any error recorded for it."""
        if field not in self.form:
            raise KeyError(field)
        self.form[field] = value
        self.errors.pop(field, None)

    def validate(self) -> bool:
        """Check the form fields and record per-field errors.

        Returns ``True`` when there are no errors.
        """
        errors: Dict[str, str] = {}
        if not self.form["name"]:
            errors["name"] = "Name is required"
        if not self.form["email"]:
            errors["email"] = "Email is required"
        elif not EMAIL_PATTERN.search(self.form["email"]):
            errors["email"] = "Email is invalid"
        if not self.form["phone"]:
            errors["phone"] = "Phone is required"
        self.errors = errors
        return not errors

    def submit(self) -> bool:
        """Validate and send the form; returns whether a contact was created.

        On success the new contact is prepended to :attr:`contacts`
        (it is the newest one) and the form is cleared.  On failure the
        form keeps its values.
        """
        if not self.validate():
            return False
        self.is_submitting = True
        try:
            contact, error = self.api.create_contact(dict(self.form))
        finally:
            self.is_submitting = False
        if error or contact is None:
            self._report("create contact", error or {"status_code": None, "message": "Empty response"})
            return False
        self.contacts = [contact] + self.contacts
        self.form = empty_form()
        self.errors = {}
        return True

    def delete(self, contact_id: str) -> bool:
        """Delete a contact after confirmation; returns whether it was removed."""
        if not self.confirm(DELETE_PROMPT):
            return False
        ok, error = self.api.delete_contact(contact_id)
        if error or not ok:
            self._report("delete contact", error or {"status_code": None, "message": "Empty response"})
            return False
        self.contacts = [c for c in self.contacts if c.get("id") != contact_id]
        return True
