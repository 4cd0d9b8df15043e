# shopsdk/errors.py
from typing import Any, Optional


class InventoryError(Exception):
    """Base class for every error the inventory client surfaces to a UI."""


class ValidationError(InventoryError):
    # Raised before any network call; message is shown to the user as-is.
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class TransportError(InventoryError):
    """
    Non-success HTTP status, or a request that never got a response.

    status is None when the connection itself failed.
    """

    def __init__(self, status: Optional[int], text: str = "", json_body: Any = None, message: Optional[str] = None):
        self.status = status
        self.text = text
        self.json_body = json_body
        if message is None:
            message = f"Server: {status} {text}".rstrip() if status is not None else "Server unreachable"
        super().__init__(message)


class CameraPermissionError(InventoryError):
    def __init__(self, reason: str = "We need camera access to take photos."):
        super().__init__(reason)
        self.reason = reason
