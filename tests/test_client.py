"""
ContactBookClient tests.

The HTTP session is replaced with a mock returning real
``requests.Response`` objects.

Run with: pytest tests/test_client.py -v
"""

import json
from unittest.mock import MagicMock

import requests

from contact_book_client import ContactBookClient


def _response(status_code, payload=None, url="http://contacts.test/contacts"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = json.dumps(payload).encode("utf-8") if payload is not None else b""
    response.headers["Content-Type"] = "application/json"
    return response


def _client(*responses):
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return ContactBookClient(base_url="http://contacts.test/", session=session), session


class TestContactBookClient:

    def test_create_contact_posts_payload(self):
        client, session = _client(_response(200, {"id": 1, "name": "Ann", "email": "a@b.com", "phone": "1234567890"}))

        data, error = client.create_contact("Ann", "a@b.com", "1234567890")

        assert error is None
        assert data["id"] == 1
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == "http://contacts.test/contacts"
        assert kwargs["json"] == {"name": "Ann", "email": "a@b.com", "phone": "1234567890"}

    def test_list_contacts_sends_pagination(self):
        client, session = _client(_response(200, [{"id": 3, "name": "Cy", "email": "c@d.ef", "phone": "0123456789"}]))

        data, error = client.list_contacts(page=2, limit=5)

        assert error is None
        assert [c["id"] for c in data] == [3]
        assert session.request.call_args.kwargs["params"] == {"page": 2, "limit": 5}

    def test_validation_error_message_is_surfaced(self):
        client, _ = _client(_response(400, {"error": "Phone must be 10 digits"}))

        data, error = client.create_contact("Ann", "a@b.com", "123")

        assert data is None
        assert error == {"status_code": 400, "message": "Phone must be 10 digits"}

    def test_delete_missing_contact(self):
        client, session = _client(_response(404, {"error": "Contact not found", "changes": 0}, url="http://contacts.test/contacts/9"))

        data, error = client.delete_contact(9)

        assert data is None
        assert error["status_code"] == 404
        assert error["message"] == "Contact not found"
        assert session.request.call_args.kwargs["method"] == "DELETE"

    def test_list_failure_returns_empty_list(self):
        client, _ = _client(_response(500, {"error": "no such table: contacts"}))

        data, error = client.list_contacts()

        assert data == []
        assert error["status_code"] == 500

    def test_transport_error(self):
        session = MagicMock(spec=requests.Session)
        session.request.side_effect = requests.ConnectionError("connection refused")
        client = ContactBookClient(session=session)

        data, error = client.get_contact(1)

        assert data is None
        assert error == {"status_code": None, "message": "connection refused"}
