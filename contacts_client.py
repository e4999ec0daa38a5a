"""Contact manager API client.

This module defines a small client wrapper around the contacts REST
API served by :mod:`contact_manager.app`.  It uses the ``requests``
library internally and exposes one method per operation:

* :meth:`ContactsAPI.list_contacts` – return every contact, newest first.
* :meth:`ContactsAPI.create_contact` – store a new contact.
* :meth:`ContactsAPI.delete_contact` – delete a contact by its identifier.

None of the methods raise on HTTP or network failures.  Each returns a
tuple ``(data, error)``; on failure ``data`` is empty and ``error`` is
a dictionary with keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class ContactsAPI:
    """Client for the ``/api/contacts`` resource."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: URL of the contacts collection, e.g.
                ``http://localhost:5000/api/contacts``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str = "", *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/abc123``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("message") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        except ValueError as exc:
            logger.error("API returned invalid JSON: %s", exc)
            return None, {"status_code": None, "message": f"Invalid JSON response: {exc}"}

    # ------------------------------------------------------------------
    # Contact operations
    # ------------------------------------------------------------------
    def list_contacts(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all contacts.

        Returns:
            A tuple ``(contacts, error)``. ``contacts`` is empty on failure.
        """
        data, error = self._request("GET")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def create_contact(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a contact.

        Args:
            payload: ``name``, ``email``, ``phone`` and optional ``message``.
        Returns:
            A tuple ``(contact, error)``.
        """
        return self._request("POST", json_body=payload)

    def delete_contact(self, contact_id: str) -> Tuple[bool, Optional[ApiError]]:
        """Delete a contact.

        Returns:
            A tuple ``(success, error)``.
        """
        data, error = self._request("DELETE", f"/{contact_id}")
        if error:
            return False, error
        return data is not None, None
