# src/config/settings.py

"""Central configuration for the storefront engine."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the storefront engine."""

    # --- Catalog source ---
    PRODUCTS_URL: str = os.getenv(
        "STOREFRONT_PRODUCTS_URL", "https://fakestoreapi.com/products"
    ).rstrip("/")
    REQUEST_TIMEOUT: int = int(
        os.getenv("STOREFRONT_REQUEST_TIMEOUT", "15")
    )                                   # Seconds before a request times out

    # --- Filtering ---
    DEFAULT_MAX_PRICE: int = 1000       # Price ceiling for an empty catalog
    RATING_STEPS: list[int] = [0, 1, 2, 3, 4]

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
