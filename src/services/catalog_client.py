# src/services/catalog_client.py

"""HTTP client for the remote product catalog."""

import logging
from typing import Any, Protocol

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.models.product import InvalidProductError, Product

logger = logging.getLogger("storefront.catalog")


class CatalogError(Exception):
    """Base class for catalog source failures."""


class CatalogFetchError(CatalogError):
    """Transport failure, non-2xx status or an unusable response body."""


class ProductNotFoundError(CatalogError):
    """The requested product id does not exist in the catalog."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class CatalogSource(Protocol):
    """Anything that can supply the catalog to a storefront session."""

    def fetch_products(self) -> list[Product]: ...

    def fetch_product(self, product_id: int) -> Product: ...


class CatalogClient:
    """Fetch products from a Fake Store style REST endpoint.

    One request per call: no retries and no backoff.  Failures surface
    as :class:`CatalogFetchError` / :class:`ProductNotFoundError`.
    """

    def __init__(self, base_url: str | None = None) -> None:
        self.settings = Settings()
        self.base_url = (base_url or self.settings.PRODUCTS_URL).rstrip("/")
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    def _get_json(self, url: str) -> curl_requests.Response:
        try:
            resp = self.session.get(
                url,
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self._request_timeout,
            )
        except Exception as exc:
            logger.warning("Request to %s failed: %s", url, exc, exc_info=True)
            raise CatalogFetchError(f"Failed to fetch {url}: {exc}") from exc
        return resp

    @staticmethod
    def _decode(resp: curl_requests.Response, url: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            raise CatalogFetchError(f"Invalid JSON from {url}") from exc

    def fetch_products(self) -> list[Product]:
        """Return the full catalog in the order the endpoint lists it."""
        url = self.base_url
        resp = self._get_json(url)
        if not 200 <= resp.status_code < 300:
            logger.warning("Catalog fetch got HTTP %d", resp.status_code)
            raise CatalogFetchError(
                f"Failed to fetch products (HTTP {resp.status_code})"
            )

        payload = self._decode(resp, url)
        if not isinstance(payload, list):
            raise CatalogFetchError("Catalog response is not a JSON array")

        try:
            products = [Product.from_dict(record) for record in payload]
        except InvalidProductError as exc:
            # Drop the whole response rather than keep a partial catalog
            raise CatalogFetchError(f"Malformed catalog record: {exc}") from exc

        logger.info("Fetched %d products from %s", len(products), url)
        return products

    def fetch_product(self, product_id: int) -> Product:
        """Return a single product by id."""
        url = f"{self.base_url}/{product_id}"
        resp = self._get_json(url)
        if resp.status_code == 404:
            raise ProductNotFoundError(product_id)
        if not 200 <= resp.status_code < 300:
            logger.warning(
                "Product %d fetch got HTTP %d", product_id, resp.status_code
            )
            raise CatalogFetchError(
                f"Failed to fetch product {product_id} "
                f"(HTTP {resp.status_code})"
            )

        # The public Fake Store API answers unknown ids with 200 and an
        # empty body
        if not resp.text.strip():
            raise ProductNotFoundError(product_id)
        payload = self._decode(resp, url)
        if payload is None:
            raise ProductNotFoundError(product_id)

        try:
            return Product.from_dict(payload)
        except InvalidProductError as exc:
            raise CatalogFetchError(
                f"Malformed record for product {product_id}: {exc}"
            ) from exc
