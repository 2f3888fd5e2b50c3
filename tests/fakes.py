# tests/fakes.py

"""In-memory catalog sources and product builders shared by tests."""

from src.models.product import Product, Rating
from src.services.catalog_client import (
    CatalogFetchError,
    ProductNotFoundError,
)


def make_product(
    product_id: int,
    title: str = "Item",
    price: float = 10.0,
    category: str = "a",
    rate: float = 4.0,
    description: str = "",
) -> Product:
    """Create a Product with only the fields a test cares about."""
    return Product(
        id=product_id,
        title=title,
        price=price,
        description=description,
        category=category,
        rating=Rating(rate=rate, count=10),
    )


SAMPLE_CATALOG: list[Product] = [
    make_product(1, "Blue Shirt", 22.3, "men's clothing", 4.1, "Slim fit cotton"),
    make_product(2, "Gold Ring", 168.0, "jewelery", 3.9, "Solid gold band"),
    make_product(3, "Rain Jacket", 39.99, "women's clothing", 3.8, "Waterproof shell"),
    make_product(4, "SSD 1TB", 109.0, "electronics", 4.8, "Fast NVMe storage"),
    make_product(5, "Cotton Tee", 7.95, "men's clothing", 2.1, "Basic tee"),
]


class FakeCatalog:
    """Catalog source serving a fixed product list."""

    def __init__(self, products: list[Product] | None = None) -> None:
        self.products = list(SAMPLE_CATALOG if products is None else products)
        self.fetch_calls = 0

    def fetch_products(self) -> list[Product]:
        self.fetch_calls += 1
        return list(self.products)

    def fetch_product(self, product_id: int) -> Product:
        for product in self.products:
            if product.id == product_id:
                return product
        raise ProductNotFoundError(product_id)


class BrokenCatalog:
    """Catalog source whose every request fails."""

    def fetch_products(self) -> list[Product]:
        raise CatalogFetchError("Failed to fetch products (HTTP 503)")

    def fetch_product(self, product_id: int) -> Product:
        raise CatalogFetchError("Failed to fetch products (HTTP 503)")
