# shopsdk/form.py
import math
import re
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Protocol

from loguru import logger

from .errors import ValidationError
from .models import Product, ProductIn
from .store import SyncStore


# plain decimal only: no underscores, no non-ASCII digits, no nan/inf words
PRICE_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


class Camera(Protocol):
    def capture_photo(self) -> Awaitable[Optional[str]]: ...


@dataclass(frozen=True)
class Notice:
    title: str
    message: str


def parse_price(text: str) -> Optional[float]:
    """Empty text means no price. Anything else must be a finite number, "0" included."""
    text = text.strip()
    if not text:
        return None
    if not PRICE_RE.fullmatch(text):
        raise ValidationError("Price must be a number")
    value = float(text)
    if not math.isfinite(value):
        raise ValidationError("Price must be a number")
    return value


class ProductForm:
    """
    Editing session for one product at a time.

    Holds the draft the user is typing into, the photo, and which product
    (if any) is being edited. save() turns the draft into a create or an
    update; the draft is only cleared once the store reports success.
    """

    def __init__(self, store: SyncStore, confirm: Callable[[str], bool], camera: Optional[Camera] = None):
        self.store = store
        self.confirm = confirm
        self.camera = camera
        self.editing_id: Optional[str] = None
        self.name = ""
        self.price = ""
        self.description = ""
        self.image: Optional[str] = None

    @property
    def editing(self) -> bool:
        return self.editing_id is not None

    def clear(self):
        self.name = ""
        self.price = ""
        self.description = ""
        self.image = None

    def cancel_edit(self):
        self.editing_id = None
        self.clear()

    def edit(self, product: Product):
        self.editing_id = product.key
        self.name = product.name or ""
        self.price = str(product.price) if product.price is not None else ""
        self.description = product.description or ""
        self.image = product.image or None

    def build_body(self) -> ProductIn:
        name = self.name.strip()
        if not name:
            raise ValidationError("Name is required")
        return ProductIn(
            name=name,
            price=parse_price(self.price),
            description=self.description.strip(),
            image=self.image,
        )

    async def save(self) -> Notice:
        body = self.build_body()
        if self.editing_id is not None:
            await self.store.update_product(self.editing_id, body)
            self.editing_id = None
            notice = Notice("Success", "Product updated")
        else:
            await self.store.create_product(body)
            notice = Notice("Success", "Product added")
        self.clear()
        return notice

    async def delete(self, product_id: str) -> Optional[Notice]:
        if not self.confirm("Are you sure you want to delete this product?"):
            logger.debug("delete of {} cancelled", product_id)
            return None
        await self.store.delete_product(product_id)
        return Notice("Deleted", "Product removed")

    async def take_photo(self) -> bool:
        """Returns True when a new photo replaced the current one."""
        if self.camera is None:
            return False
        data_uri = await self.camera.capture_photo()
        if data_uri is None:
            return False
        self.image = data_uri
        return True
