#!/usr/bin/env python
from products_sdk import CatalogAPIError, CatalogClient


def main():
    c = CatalogClient(base_url="http://127.0.0.1:8085")

    # -----------------------------
    # Seeded catalog
    # -----------------------------
    print("Listing products...")
    for p in c.list_products():
        print(p)

    # -----------------------------
    # Create product
    # -----------------------------
    print("\nCreating a product...")
    created = c.create_product("USB-C Hub", 49.99, 40, "7-in-1 hub with HDMI output", "Accessories")
    print(created)
    product_id = created["id"]

    # -----------------------------
    # Get product
    # -----------------------------
    print(f"\nFetching product {product_id}...")
    print(c.get_product(product_id))

    # -----------------------------
    # Update product
    # -----------------------------
    print(f"\nUpdating product {product_id}...")
    c.update_product(product_id, "USB-C Hub", 44.99, 35, "7-in-1 hub with HDMI output", "Accessories")
    print(c.get_product(product_id))

    # -----------------------------
    # Delete product
    # -----------------------------
    print(f"\nDeleting product {product_id}...")
    c.delete_product(product_id)
    try:
        c.get_product(product_id)
    except CatalogAPIError as e:
        print(f"Lookup after delete: {e}")


if __name__ == "__main__":
    main()
