# shopsdk/products.py
from typing import List, Optional
from urllib.parse import quote

from loguru import logger

from .models import Product, ProductIn
from .transport import Transport


class ProductClient:
    """The four product calls of the backend. Each raises TransportError on a non-2xx status."""

    def __init__(self, transport: Transport):
        self.transport = transport

    async def list_products(self) -> List[Product]:
        r = await self.transport.request("GET", "/products")
        data = r.json_body
        if not isinstance(data, list):
            # the UI must always have something to render
            logger.debug("list body is {}, not an array; treating as empty", type(data).__name__)
            return []
        out = []
        for item in data:
            p = Product.from_wire(item)
            if p is None:
                logger.debug("skipping malformed product entry: {!r}", item)
                continue
            out.append(p)
        return out

    async def create_product(self, body: ProductIn) -> Optional[Product]:
        r = await self.transport.request("POST", "/products", body.to_payload())
        return Product.from_wire(r.json_body)

    async def update_product(self, product_id: str, body: ProductIn) -> Optional[Product]:
        r = await self.transport.request("PUT", f"/products/{quote(product_id, safe='')}", body.to_payload())
        return Product.from_wire(r.json_body)

    async def delete_product(self, product_id: str) -> bool:
        await self.transport.request("DELETE", f"/products/{quote(product_id, safe='')}")
        return True
