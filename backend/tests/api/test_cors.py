"""CORS Allow-List — headers only for the configured origin with DELETE.

Invariants:
    - Origin http://localhost:63342 + DELETE (actual or preflight) → allow headers
    - Any other origin, or GET/POST as declared method → no Access-Control-* headers
    - Status codes of the underlying routes are never changed
"""

import pytest

ALLOWED_ORIGIN = "http://localhost:63342"


def _cors_headers(res) -> dict:
    return {
        k: v for k, v in res.headers.items() if k.startswith("access-control-")
    }


async def test_delete_from_allowed_origin_gets_headers(client):
    res = await client.delete("/question", headers={"Origin": ALLOWED_ORIGIN})
    # Route only answers GET; CORS must not hide the 405
    assert res.status_code == 405
    assert res.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
    assert res.headers["access-control-allow-methods"] == "DELETE"
    assert "Origin" in res.headers["vary"]


async def test_preflight_for_delete_from_allowed_origin(client):
    res = await client.options(
        "/question",
        headers={"Origin": ALLOWED_ORIGIN, "Access-Control-Request-Method": "DELETE"},
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
    assert res.headers["access-control-allow-methods"] == "DELETE"


@pytest.mark.parametrize("method", ["GET", "POST", "PUT"])
async def test_preflight_for_other_methods_gets_no_headers(client, method):
    res = await client.options(
        "/question",
        headers={"Origin": ALLOWED_ORIGIN, "Access-Control-Request-Method": method},
    )
    assert _cors_headers(res) == {}


async def test_get_from_allowed_origin_gets_no_headers(client):
    res = await client.get("/question", headers={"Origin": ALLOWED_ORIGIN})
    assert res.status_code == 200
    assert res.json()["id"] == "1"
    assert _cors_headers(res) == {}


@pytest.mark.parametrize("origin", [
    "http://localhost:3000",
    "http://localhost:63343",
    "https://localhost:63342",
    "http://evil.example",
    "null",
])
async def test_delete_from_other_origin_gets_no_headers(client, origin):
    res = await client.delete("/question", headers={"Origin": origin})
    assert res.status_code == 405
    assert _cors_headers(res) == {}


async def test_request_without_origin_is_untouched(client):
    res = await client.get("/hello")
    assert res.text == "hello world!"
    assert _cors_headers(res) == {}


async def test_policy_applies_to_every_route(client):
    res = await client.delete("/nonexistent", headers={"Origin": ALLOWED_ORIGIN})
    assert res.status_code == 404
    assert res.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
