# tests/test_transport.py
import asyncio

import httpx
import pytest

from shopsdk.errors import TransportError
from shopsdk.products import ProductClient
from shopsdk.transport import Transport


def test_every_request_carries_json_and_tunnel_headers(backend, transport):
    asyncio.run(transport.request("GET", "/products"))
    asyncio.run(transport.request("DELETE", "/products/x"))

    for req in backend.requests:
        assert req.headers["ngrok-skip-browser-warning"] == "true"
        assert req.headers["content-type"] == "application/json"


def test_non_2xx_raises_with_status_and_raw_text(backend, transport):
    backend.fail("POST", 500, "boom <html>")
    with pytest.raises(TransportError) as exc:
        asyncio.run(transport.request("POST", "/products", {"name": "x"}))
    assert exc.value.status == 500
    assert exc.value.text == "boom <html>"
    assert exc.value.json_body is None
    assert str(exc.value) == "Server: 500 boom <html>"


def test_error_json_body_is_parsed_when_possible(backend, transport):
    backend.fail("PUT", 404, '{"detail": "product not found"}')
    with pytest.raises(TransportError) as exc:
        asyncio.run(transport.request("PUT", "/products/nope", {"name": "x"}))
    assert exc.value.status == 404
    assert exc.value.json_body == {"detail": "product not found"}


def test_success_with_invalid_json_yields_none():
    def handler(request):
        return httpx.Response(200, text="not json")

    t = Transport("http://backend.test", client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    resp = asyncio.run(t.request("GET", "/products"))
    assert resp.ok
    assert resp.json_body is None
    assert resp.text == "not json"


def test_connection_failure_is_a_transport_error_without_status():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    t = Transport("http://backend.test", client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    with pytest.raises(TransportError) as exc:
        asyncio.run(t.request("GET", "/products"))
    assert exc.value.status is None


@pytest.mark.parametrize("body", [b"null", b"{}", b'"oops"', b"42", b"<html>tunnel page</html>", b""])
def test_list_degrades_to_empty_for_non_array_bodies(backend, transport, body):
    backend.list_body = body
    assert asyncio.run(ProductClient(transport).list_products()) == []


def test_list_failure_carries_status(backend, transport):
    backend.fail("GET", 502, "bad gateway")
    with pytest.raises(TransportError) as exc:
        asyncio.run(ProductClient(transport).list_products())
    assert exc.value.status == 502
