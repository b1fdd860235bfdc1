"""Contact Book API client.

A thin wrapper around the Contact Book HTTP API built on the
``requests`` library.  It exposes one method per operation:

* :meth:`ContactBookClient.list_contacts` – return a page of contacts.
* :meth:`ContactBookClient.get_contact` – fetch a single contact by id.
* :meth:`ContactBookClient.create_contact` – add a new contact.
* :meth:`ContactBookClient.delete_contact` – remove a contact.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list) and
``error`` is a dictionary with keys ``status_code`` and ``message``.
The message is taken from the service's ``{"error": ...}`` body when
one is present.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class ContactBookClient:
    """Client for the ``/contacts`` endpoints."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/contacts``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
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
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Contact operations
    # ------------------------------------------------------------------
    def list_contacts(self, page: int = 1, limit: int = 10) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve one page of contacts, ordered by id."""
        data, error = self._request("GET", "/contacts", params={"page": page, "limit": limit})
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_contact(self, contact_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"/contacts/{contact_id}")

    def create_contact(self, name: str, email: str, phone: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a contact and return the stored record with its id."""
        payload = {"name": name, "email": email, "phone": phone}
        return self._request("POST", "/contacts", json_body=payload)

    def delete_contact(self, contact_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Delete a contact.

        On success ``data`` is ``{"message": "Contact deleted", "changes": n}``.
        """
        return self._request("DELETE", f"/contacts/{contact_id}")
