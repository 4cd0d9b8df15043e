# shopsdk/camera.py
import base64
import mimetypes
from pathlib import Path
from typing import Callable, Optional

import httpx
from loguru import logger

from .config import SNAPSHOT_URL
from .errors import CameraPermissionError, TransportError

DEFAULT_MIME = "image/jpeg"


def encode_data_uri(raw: bytes, mime: str = DEFAULT_MIME) -> str:
    return f"data:{mime};base64,{base64.b64encode(raw).decode('ascii')}"


class FileCamera:
    """
    Takes a "photo" by reading an image file.

    ask_path is called for every capture; returning None or an empty
    string means the user cancelled.
    """

    def __init__(self, ask_path: Callable[[], Optional[str]]):
        self.ask_path = ask_path

    async def capture_photo(self) -> Optional[str]:
        answer = self.ask_path()
        if not answer or not answer.strip():
            return None
        path = Path(answer.strip()).expanduser()
        try:
            raw = path.read_bytes()
        except PermissionError as e:
            raise CameraPermissionError(f"Cannot read {path}: permission denied") from e
        except OSError as e:
            raise CameraPermissionError(f"Cannot read {path}: {e.strerror or e}") from e
        mime, _ = mimetypes.guess_type(path.name)
        if not mime or not mime.startswith("image/"):
            mime = DEFAULT_MIME
        logger.debug("captured {} ({} bytes)", path, len(raw))
        return encode_data_uri(raw, mime)


class SnapshotCamera:
    """Grabs a still from an HTTP snapshot endpoint, e.g. a phone running an IP webcam app."""

    def __init__(self, url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        self.url = url or SNAPSHOT_URL
        self.client = client

    async def capture_photo(self) -> Optional[str]:
        if self.client is not None:
            r = await self._get(self.client)
        else:
            async with httpx.AsyncClient() as client:
                r = await self._get(client)

        if r.status_code in (401, 403):
            raise CameraPermissionError()
        if not r.is_success:
            raise TransportError(r.status_code, text=r.text)
        mime = r.headers.get("content-type", DEFAULT_MIME).split(";")[0].strip()
        if not mime.startswith("image/"):
            mime = DEFAULT_MIME
        return encode_data_uri(r.content, mime)

    async def _get(self, client: httpx.AsyncClient) -> httpx.Response:
        try:
            return await client.get(self.url)
        except httpx.HTTPError as e:
            raise TransportError(None, message=f"Camera unreachable: {e}") from e
