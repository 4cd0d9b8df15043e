# tests/conftest.py
import json
from urllib.parse import unquote

import httpx
import pytest

from shopsdk.form import ProductForm
from shopsdk.products import ProductClient
from shopsdk.store import SyncStore
from shopsdk.transport import Transport


class FakeBackend:
    """Scripted stand-in for the products API, recording every request it sees."""

    def __init__(self):
        self.products = []
        self.calls = []
        self.requests = []
        self.failures = {}
        self.list_body = None
        self.on_request = None
        self._next = 1

    def fail(self, method: str, status: int, text: str = ""):
        self.failures[method] = (status, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append((request.method, request.url.path))
        self.requests.append(request)
        if self.on_request:
            self.on_request(request)

        if request.method in self.failures:
            status, text = self.failures[request.method]
            return httpx.Response(status, text=text)

        parts = [unquote(s) for s in request.url.raw_path.decode().split("?")[0].strip("/").split("/")]
        if request.method == "GET":
            if self.list_body is not None:
                return httpx.Response(200, content=self.list_body)
            return httpx.Response(200, json=self.products)
        if request.method == "POST":
            item = {"_id": f"p{self._next}", **json.loads(request.content)}
            self._next += 1
            self.products.append(item)
            return httpx.Response(201, json=item)
        if request.method == "PUT":
            pid = parts[1]
            for i, p in enumerate(self.products):
                if p["_id"] == pid:
                    self.products[i] = {"_id": pid, **json.loads(request.content)}
                    return httpx.Response(200, json=self.products[i])
            return httpx.Response(404, json={"detail": "product not found"})
        if request.method == "DELETE":
            pid = parts[1]
            before = len(self.products)
            self.products = [p for p in self.products if p["_id"] != pid]
            if len(self.products) == before:
                return httpx.Response(404, json={"detail": "product not found"})
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def transport(backend):
    client = httpx.AsyncClient(transport=httpx.MockTransport(backend.handler))
    return Transport("http://backend.test", client=client)


@pytest.fixture
def store(transport):
    return SyncStore(ProductClient(transport))


class Confirmer:
    def __init__(self, answer: bool):
        self.answer = answer
        self.messages = []

    def __call__(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer


@pytest.fixture
def make_form(store):
    def _make(answer: bool = True, camera=None):
        return ProductForm(store, confirm=Confirmer(answer), camera=camera)
    return _make
