import uuid
from fastapi import HTTPException

from .core import ProductIn, _make_product_dict
from .database import PRODUCTS, _LOCKS, _get_lock

# Core logic for the product endpoints; main.py only wires routes to these.

async def list_products_logic():
    return list(PRODUCTS.values())

async def create_product_logic(payload: ProductIn):
    pid = uuid.uuid4().hex
    PRODUCTS[pid] = _make_product_dict(pid, payload)
    return PRODUCTS[pid]

async def update_product_logic(product_id: str, payload: ProductIn):
    lock = _get_lock(f"product:{product_id}")
    await lock.acquire()
    try:
        if product_id not in PRODUCTS:
            raise HTTPException(status_code=404, detail="product not found")
        # whole-record replace; fields left out of the body are dropped
        PRODUCTS[product_id] = _make_product_dict(product_id, payload)
        return PRODUCTS[product_id]
    finally:
        lock.release()

async def delete_product_logic(product_id: str):
    lock = _get_lock(f"product:{product_id}")
    await lock.acquire()
    try:
        if PRODUCTS.pop(product_id, None) is None:
            raise HTTPException(status_code=404, detail="product not found")
    finally:
        lock.release()
    _LOCKS.pop(f"product:{product_id}", None)
    return {"deleted": product_id}

# Utility: reset (for tests/demo)
async def reset_all_logic():
    PRODUCTS.clear()
    _LOCKS.clear()
    return {"status": "reset"}
