import asyncio

from shopsdk.config import API_BASE, configure_logging
from shopsdk.errors import TransportError
from shopsdk.form import ProductForm
from shopsdk.products import ProductClient
from shopsdk.store import SyncStore
from shopsdk.transport import Transport

# Double-tapping "Add product": nothing queues or cancels, so both saves hit the server.


async def tap_save(form: ProductForm, who: str):
    try:
        notice = await form.save()
        print(f"✅ {who}: {notice.message}")
    except TransportError as e:
        print(f"❌ {who} failed: {e}")


async def main():
    configure_logging()
    async with Transport(API_BASE) as t:
        await t.request("POST", "/reset")
        store = SyncStore(ProductClient(t))
        store.subscribe(lambda: print(f"   loading={store.loading} posting={store.posting} products={len(store.products)}"))

        form = ProductForm(store, confirm=lambda message: True)
        form.name = "Gaming Laptop"
        form.price = "5000"

        print("\n⚡ Two overlapping saves...")
        await asyncio.gather(tap_save(form, "tap 1"), tap_save(form, "tap 2"))

        print("\n📦 Final list:")
        for p in store.products:
            print("  ", p.key, p.name, p.price)


if __name__ == "__main__":
    asyncio.run(main())
