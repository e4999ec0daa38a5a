import json

import pytest
import requests

from contact_form import ContactForm, DELETE_PROMPT
from contacts_client import ContactsAPI


BASE_URL = "http://api.test/api/contacts"

ADA = {
    "id": "a" * 24,
    "name": "Ada",
    "email": "ada@x.com",
    "phone": "555",
    "message": None,
    "createdAt": "2025-01-01T12:00:00.000Z",
    "updatedAt": "2025-01-01T12:00:00.000Z",
}
BOB = {**ADA, "id": "b" * 24, "name": "Bob", "createdAt": "2025-01-02T12:00:00.000Z"}


def make_response(status_code, body=None, url=BASE_URL):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = json.dumps(body).encode() if body is not None else b""
    return response


class FakeSession:
    """Returns queued responses and records every request."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append((method, url, json))
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def make_api(*responses):
    session = FakeSession(*responses)
    return ContactsAPI(base_url=BASE_URL + "/", session=session), session


# ----------------------------------------------------------------------
# ContactsAPI
# ----------------------------------------------------------------------
def test_list_contacts():
    api, session = make_api(make_response(200, [BOB, ADA]))

    contacts, error = api.list_contacts()

    assert error is None
    assert contacts == [BOB, ADA]
    assert session.calls == [("GET", BASE_URL, None)]


def test_create_contact_posts_payload():
    payload = {"name": "Ada", "email": "ada@x.com", "phone": "555", "message": ""}
    api, session = make_api(make_response(201, ADA))

    contact, error = api.create_contact(payload)

    assert error is None
    assert contact == ADA
    assert session.calls == [("POST", BASE_URL, payload)]


def test_create_contact_reports_server_message():
    api, _ = make_api(make_response(400, {"message": "Contact validation failed: name: Name is required"}))

    contact, error = api.create_contact({})

    assert contact is None
    assert error == {"status_code": 400, "message": "Contact validation failed: name: Name is required"}


def test_delete_contact_hits_item_url():
    api, session = make_api(make_response(200, {"id": ADA["id"]}))

    ok, error = api.delete_contact(ADA["id"])

    assert ok is True
    assert error is None
    assert session.calls == [("DELETE", f"{BASE_URL}/{ADA['id']}", None)]


def test_delete_contact_not_found():
    api, _ = make_api(make_response(404, {"message": "Contact not found"}))

    ok, error = api.delete_contact("missing")

    assert ok is False
    assert error == {"status_code": 404, "message": "Contact not found"}


def test_network_failure_is_returned_not_raised():
    api, _ = make_api(requests.ConnectionError("connection refused"))

    contacts, error = api.list_contacts()

    assert contacts == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


# ----------------------------------------------------------------------
# ContactForm
# ----------------------------------------------------------------------
def make_form(*responses, confirm=True):
    api, session = make_api(*responses)
    reported = []
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return confirm

    form = ContactForm(api, confirm=ask, on_error=reported.append)
    return form, session, reported, prompts


def fill(form, **fields):
    for field, value in fields.items():
        form.change(field, value)


def test_load_populates_list_and_resets_form():
    form, session, _, _ = make_form(make_response(200, [BOB, ADA]))
    form.form["name"] = "autofilled"

    form.load()

    assert form.contacts == [BOB, ADA]
    assert form.form == {"name": "", "email": "", "phone": "", "message": ""}
    assert len(session.calls) == 1


def test_empty_email_blocks_submit_without_network_call():
    form, session, _, _ = make_form()
    fill(form, name="Ada", phone="555")

    assert form.submit() is False
    assert form.errors == {"email": "Email is required"}
    assert session.calls == []


def test_validate_reports_each_field():
    form, _, _, _ = make_form()

    assert form.validate() is False
    assert form.errors == {
        "name": "Name is required",
        "email": "Email is required",
        "phone": "Phone is required",
    }

    fill(form, name="Ada", email="ada@x", phone="555")
    assert form.validate() is False
    assert form.errors == {"email": "Email is invalid"}


def test_change_clears_only_that_fields_error():
    form, _, _, _ = make_form()
    form.validate()

    form.change("name", "A")

    assert "name" not in form.errors
    assert set(form.errors) == {"email", "phone"}


def test_change_unknown_field_raises():
    form, _, _, _ = make_form()
    with pytest.raises(KeyError):
        form.change("contact-name", "Ada")


def test_submit_prepends_and_clears_form():
    form, session, _, _ = make_form(make_response(201, BOB))
    form.contacts = [ADA]
    fill(form, name="Bob", email="bob@x.com", phone="555", message="hello")

    assert form.submit() is True

    assert form.contacts == [BOB, ADA]
    assert form.form == {"name": "", "email": "", "phone": "", "message": ""}
    assert form.errors == {}
    assert form.is_submitting is False
    assert session.calls[0][2] == {"name": "Bob", "email": "bob@x.com", "phone": "555", "message": "hello"}


def test_submit_failure_keeps_form_and_reports():
    form, _, reported, _ = make_form(make_response(400, {"message": "bad"}))
    fill(form, name="Bob", email="bob@x.com", phone="555")

    assert form.submit() is False

    assert form.contacts == []
    assert form.form["name"] == "Bob"
    assert form.is_submitting is False
    assert reported == [{"status_code": 400, "message": "bad"}]


def test_delete_requires_confirmation():
    form, session, _, prompts = make_form(confirm=False)
    form.contacts = [BOB, ADA]

    assert form.delete(ADA["id"]) is False

    assert prompts == [DELETE_PROMPT]
    assert session.calls == []
    assert form.contacts == [BOB, ADA]


def test_delete_removes_contact_locally():
    form, _, _, _ = make_form(make_response(200, {"id": ADA["id"]}))
    form.contacts = [BOB, ADA]

    assert form.delete(ADA["id"]) is True
    assert form.contacts == [BOB]


def test_delete_failure_keeps_contact_and_reports():
    form, _, reported, _ = make_form(make_response(500, {"message": "boom"}))
    form.contacts = [ADA]

    assert form.delete(ADA["id"]) is False
    assert form.contacts == [ADA]
    assert reported == [{"status_code": 500, "message": "boom"}]


def test_error_body_that_is_not_an_object():
    api, _ = make_api(make_response(502, ["upstream", "down"]))

    contacts, error = api.list_contacts()

    assert contacts == []
    assert error == {"status_code": 502, "message": "['upstream', 'down']"}


def test_load_survives_non_object_error_body():
    form, _, reported, _ = make_form(make_response(502, "Bad Gateway"))

    form.load()

    assert form.contacts == []
    assert reported == [{"status_code": 502, "message": "Bad Gateway"}]
