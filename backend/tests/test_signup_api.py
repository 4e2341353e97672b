"""
Signup HTTP surface tests.

 - GET /signup renders the empty form
 - POST /signup re-renders with the entered values on failure (422), confirms on success
 - POST /api/v1/signup/validate returns 200 or a 422 body with errors and echo
"""

import httpx
import pytest
from httpx import ASGITransport

from signup.main import app

pytestmark = pytest.mark.anyio

VALID_POST = {
    "email": "a@b.com",
    "password": "secret1",
    "confirm-password": "secret1",
    "first-name": "Ada",
    "last-name": "Lovelace",
    "role": "student",
    "acquisition": ["google", "other"],
    "terms": "on",
}

VALID_JSON = {
    "email": "a@b.com",
    "password": "secret1",
    "confirmPassword": "secret1",
    "firstName": "A",
    "lastName": "B",
    "role": "student",
    "acquisitionChannels": ["google"],
    "termsAccepted": True,
}


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def test_get_signup_renders_empty_form():
    async with _client() as client:
        r = await client.get("/signup")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert '<form method="post" action="/signup">' in r.text
    assert 'class="error"' not in r.text


async def test_post_valid_form_confirms_signup():
    async with _client() as client:
        r = await client.post("/signup", data=VALID_POST)

    assert r.status_code == 200
    assert "Welcome, Ada!" in r.text


async def test_post_invalid_form_rerenders_with_values_and_errors():
    data = {**VALID_POST, "confirm-password": "other1"}
    data.pop("terms")

    async with _client() as client:
        r = await client.post("/signup", data=data)

    assert r.status_code == 422
    assert "<li>Passwords do not match.</li>" in r.text
    assert "<li>You must agree to the terms and conditions.</li>" in r.text
    assert r.text.index("Passwords do not match.") < r.text.index("You must agree")
    assert 'value="a@b.com"' in r.text
    assert 'value="other1"' in r.text
    assert '<option value="student" selected>' in r.text
    assert 'value="google" checked' in r.text
    assert 'value="friend">' in r.text


async def test_post_empty_form_lists_every_error():
    async with _client() as client:
        r = await client.post("/signup", data={})

    assert r.status_code == 422
    assert r.text.count("<li>") == 7


async def test_api_validate_success():
    async with _client() as client:
        r = await client.post("/api/v1/signup/validate", json=VALID_JSON)

    assert r.status_code == 200
    assert r.json() == {"status": "success"}


async def test_api_validate_failure_returns_errors_and_echo():
    payload = {**VALID_JSON, "termsAccepted": False}

    async with _client() as client:
        r = await client.post("/api/v1/signup/validate", json=payload)

    assert r.status_code == 422
    body = r.json()
    assert body["error"] == "validation_error"
    assert body["errors"] == ["You must agree to the terms and conditions."]
    assert body["echo"] == payload


async def test_health_and_root():
    async with _client() as client:
        health = await client.get("/api/v1/health")
        root = await client.get("/")

    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert root.json()["form"] == "/signup"


async def test_api_validate_rejects_email_with_trailing_newline():
    payload = {**VALID_JSON, "email": "a@b.com\n"}

    async with _client() as client:
        r = await client.post("/api/v1/signup/validate", json=payload)

    assert r.status_code == 422
    assert r.json()["errors"] == ["Invalid email address."]
