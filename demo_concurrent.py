import asyncio
from products_sdk import CatalogClient


async def main():
    c = CatalogClient(base_url="http://127.0.0.1:8085")

    before = c.list_products()
    print(f"\n📦 Catalog starts with {len(before)} products")

    # Fire creates concurrently; every one must get its own id
    print("\n⚡ Simulating concurrent creates...")
    responses = await asyncio.gather(*[
        c.create_product_async(f"Sticker #{i}", 1.5, 100, category="Merch")
        for i in range(10)
    ])

    ids = []
    for r in responses:
        if r.status_code == 201:
            body = r.json()
            ids.append(body["id"])
            print(f"✅ {body['name']} -> id {body['id']} ({r.headers.get('location')})")
        else:
            print(f"❌ create failed: HTTP {r.status_code} {r.text}")

    print(f"\n🔢 {len(ids)} created, {len(set(ids))} distinct ids")

    for pid in ids:
        c.delete_product(pid)
    print(f"🧹 Cleaned up, catalog has {len(c.list_products())} products")


if __name__ == "__main__":
    asyncio.run(main())
