# shopsdk/store.py
from contextlib import contextmanager
from typing import Callable, List, Optional, Tuple

from loguru import logger

from .models import Product, ProductIn
from .products import ProductClient

IDLE = "idle"
BUSY = "busy"


class BusyFlag:
    """
    idle/busy state for one class of operation.

    Only entered through hold(), which always returns the flag to idle,
    whether the wrapped call succeeds, raises, or returns garbage.
    Overlapping holds are not counted: the last one to settle wins.
    """

    def __init__(self, name: str, on_change: Optional[Callable[[], None]] = None):
        self.name = name
        self.state = IDLE
        self._on_change = on_change

    def __bool__(self):
        return self.state == BUSY

    def _set(self, state: str):
        if state == self.state:
            return
        logger.debug("{}: {} -> {}", self.name, self.state, state)
        self.state = state
        if self._on_change:
            self._on_change()

    @contextmanager
    def hold(self):
        self._set(BUSY)
        try:
            yield self
        finally:
            self._set(IDLE)


class SyncStore:
    """
    In-memory product collection kept in step with the backend.

    products is only ever replaced wholesale from a list response; every
    mutation is followed by a full refetch instead of a local patch.
    """

    def __init__(self, client: ProductClient):
        self.client = client
        self.products: Tuple[Product, ...] = ()
        self._listeners: List[Callable[[], None]] = []
        self._loading = BusyFlag("loading", self._notify)
        self._posting = BusyFlag("posting", self._notify)

    @property
    def loading(self) -> bool:
        return bool(self._loading)

    @property
    def posting(self) -> bool:
        return bool(self._posting)

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a re-render callback. Returns a function that removes it."""
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self):
        for cb in list(self._listeners):
            cb()

    def find(self, product_id: str) -> Optional[Product]:
        for p in self.products:
            if p.key == product_id:
                return p
        return None

    async def fetch_products(self) -> List[Product]:
        with self._loading.hold():
            items = await self.client.list_products()
            self.products = tuple(items)
            self._notify()
            return items

    async def create_product(self, body: ProductIn) -> Optional[Product]:
        with self._posting.hold():
            res = await self.client.create_product(body)
            await self.fetch_products()
            return res

    async def update_product(self, product_id: str, body: ProductIn) -> Optional[Product]:
        with self._posting.hold():
            res = await self.client.update_product(product_id, body)
            await self.fetch_products()
            return res

    async def delete_product(self, product_id: str) -> bool:
        with self._loading.hold():
            await self.client.delete_product(product_id)
            await self.fetch_products()
            return True
