#!/usr/bin/env python
import asyncio

from shopsdk.config import API_BASE, configure_logging
from shopsdk.form import ProductForm
from shopsdk.products import ProductClient
from shopsdk.store import SyncStore
from shopsdk.transport import Transport


def show(store: SyncStore):
    for p in store.products:
        print(f"  {p.key}  {p.name!r:20} price={p.price} description={p.description!r}")
    if not store.products:
        print("  (no products)")


async def main():
    configure_logging()
    async with Transport(API_BASE) as t:
        # -----------------------------
        # Reset everything for demo
        # -----------------------------
        print("Resetting store...")
        await t.request("POST", "/reset")

        store = SyncStore(ProductClient(t))
        form = ProductForm(store, confirm=lambda message: True)

        # -----------------------------
        # Add products through the form
        # -----------------------------
        print("\nAdding products...")
        for name, price, description in [("Mug", "9.99", ""), ("Lamp", "", "desk lamp"), ("Pen", "0", "")]:
            form.name, form.price, form.description = name, price, description
            notice = await form.save()
            print(f"{notice.title}: {notice.message}")
        show(store)

        # -----------------------------
        # Edit one
        # -----------------------------
        print("\nEditing 'Lamp'...")
        lamp = next(p for p in store.products if p.name == "Lamp")
        form.edit(lamp)
        form.price = "24.50"
        print((await form.save()).message)
        show(store)

        # -----------------------------
        # Delete one
        # -----------------------------
        print("\nDeleting 'Pen'...")
        pen = next(p for p in store.products if p.name == "Pen")
        print((await form.delete(pen.key)).message)
        show(store)


if __name__ == "__main__":
    asyncio.run(main())
