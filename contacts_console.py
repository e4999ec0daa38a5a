"""An interactive terminal front end for the contact manager.

This module renders the contact list and the add-contact form in a
terminal and drives a :class:`contact_form.ContactForm`.  Supported
commands:

* ``list`` – reload and print all contacts.
* ``add`` – prompt for name, email, phone and an optional message,
  re-prompting only the fields that failed validation.
* ``delete <id|n>`` – delete the contact with the given ID or, when no
  loaded contact has that ID, the one shown at position ``n``, after
  confirmation.
* ``help`` and ``quit``.

The API location is read from the ``API_URL`` environment variable
(default ``http://localhost:5000/api/contacts``).  Failed calls are
printed as well as logged.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from contact_form import ContactForm
from contacts_client import ContactsAPI
from contact_manager.app.core.config import settings


logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "name": "Full Name",
    "email": "Email Address",
    "phone": "Phone Number",
    "message": "Message (Optional)",
}

HELP_TEXT = (
    "Commands:\n"
    "  list             show all contacts\n"
    "  add              add a new contact\n"
    "  delete <id|n>    delete a contact by ID or list position\n"
    "  help             show this help\n"
    "  quit             exit"
)


def format_added(created_at: Optional[str]) -> str:
    """Render an ISO timestamp as a local date, or ``?`` if unparseable."""
    if not created_at:
        return "?"
    try:
        stamp = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
    except ValueError:
        return "?"
    return stamp.astimezone().strftime("%Y-%m-%d")


def render_contact(position: int, contact: Dict[str, Any]) -> str:
    name = contact.get("name") or ""
    initial = name[:1].upper() or "?"
    lines = [
        f"{position:>3}. [{initial}] {name}",
        f"     Added: {format_added(contact.get('createdAt'))}  (id {contact.get('id')})",
        f"     Email: {contact.get('email')}",
        f"     Phone: {contact.get('phone')}",
    ]
    if contact.get("message"):
        lines.append(f'     "{contact["message"]}"')
    return "\n".join(lines)


class ContactsConsole:
    """Terminal UI bound to a :class:`ContactForm`."""

    def __init__(
        self,
        api: ContactsAPI,
        *,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.input = input_func
        self.output = output
        self.form = ContactForm(api, confirm=self._confirm, on_error=self._show_error)

    def _confirm(self, prompt: str) -> bool:
        return self.input(f"{prompt} [y/N] ").strip().lower() in {"y", "yes"}

    def _show_error(self, error: Dict[str, Any]) -> None:
        self.output(f"Error: {error.get('message')}")

    def show_list(self) -> None:
        contacts = self.form.contacts
        self.output(f"Contact List ({len(contacts)})")
        if not contacts:
            self.output("No contacts found. Add one to get started!")
            return
        for position, contact in enumerate(contacts, start=1):
            self.output(render_contact(position, contact))

    def add(self) -> None:
        """Collect the form, re-asking for fields that fail validation."""
        for field in ("name", "email", "phone", "message"):
            self.form.change(field, self.input(f"{FIELD_LABELS[field]}: ").strip())
        while not self.form.validate():
            for field, message in list(self.form.errors.items()):
                self.output(message)
                self.form.change(field, self.input(f"{FIELD_LABELS[field]}: ").strip())
        self.output("Saving...")
        if self.form.submit():
            self.output(f"Saved {self.form.contacts[0].get('name')}.")

    def delete(self, target: str) -> None:
        """Delete by ID, or by list position when no loaded contact has that ID."""
        contact_id = target
        known_ids = {c.get("id") for c in self.form.contacts}
        if target not in known_ids and target.isdigit():
            position = int(target)
            if not 1 <= position <= len(self.form.contacts):
                self.output(f"No contact at position {position}.")
                return
            contact_id = self.form.contacts[position - 1]["id"]
        if self.form.delete(contact_id):
            self.output("Contact deleted.")

    def handle(self, line: str) -> bool:
        """Execute one command line; returns ``False`` when the user quits."""
        command, _, args = line.strip().partition(" ")
        command = command.lower()
        if command in {"quit", "exit"}:
            return False
        if command == "list":
            self.form.load()
            self.show_list()
        elif command == "add":
            self.add()
        elif command == "delete":
            if not args.strip():
                self.output("Usage: delete <id|n>")
            else:
                self.delete(args.strip())
        elif command in {"help", "?"}:
            self.output(HELP_TEXT)
        elif command:
            self.output(f"Unknown command: {command}. Type 'help' for a list of commands.")
        return True

    def run(self) -> None:
        """Load the list once and process commands until ``quit`` or EOF."""
        self.form.load()
        self.show_list()
        self.output(HELP_TEXT)
        try:
            while self.handle(self.input("> ")):
                pass
        except (EOFError, KeyboardInterrupt):
            self.output("")
        logger.info("Console closed.")


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(message)s")
    console = ContactsConsole(ContactsAPI(base_url=settings.api_url))
    console.run()


if __name__ == "__main__":
    main()
