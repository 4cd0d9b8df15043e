# shopsdk/transport.py
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from loguru import logger

from .config import API_BASE
from .errors import TransportError

# The tunnel in front of the backend serves a browser warning page unless this is present.
TUNNEL_BYPASS_HEADER = {"ngrok-skip-browser-warning": "true"}
DEFAULT_HEADERS = {"Content-Type": "application/json", **TUNNEL_BYPASS_HEADER}


@dataclass(frozen=True)
class Response:
    status: int
    json_body: Any
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport:
    """
    Thin async HTTP layer bound to one base origin.

    Every request carries the JSON content type and the tunnel bypass header.
    Non-2xx statuses raise TransportError; nothing is retried.
    """

    def __init__(self, base_url: str = API_BASE, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        # no timeout override: httpx's default applies
        self.client = client if client is not None else httpx.AsyncClient()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()

    async def aclose(self):
        if self._owns_client:
            await self.client.aclose()

    async def request(self, method: str, path: str, body: Any = None) -> Response:
        url = f"{self.base_url}{path}"
        logger.debug("{} {}", method, url)
        try:
            r = await self.client.request(method, url, json=body, headers=DEFAULT_HEADERS)
        except httpx.HTTPError as e:
            logger.debug("{} {} failed: {}", method, url, e)
            raise TransportError(None, message=f"Network error: {e}") from e

        try:
            json_body = r.json()
        except ValueError:
            json_body = None
        text = r.text
        resp = Response(status=r.status_code, json_body=json_body, text=text)
        logger.debug("{} {} -> {}", method, url, resp.status)
        if not resp.ok:
            raise TransportError(resp.status, text=text, json_body=resp.json_body)
        return resp
