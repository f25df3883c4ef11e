# src/config/settings.py

"""Central configuration for the jewel_search engine."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the jewel_search engine."""

    # --- Matching ---
    MIN_QUERY_LENGTH: int = 2           # Shorter queries never match
    SUGGESTION_LIMIT: int = 8           # Dropdown cap
    FUZZY_MIN_SIMILARITY: float = 0.6   # 1 - distance / longest length
    FUZZY_MIN_WORD_LENGTH: int = 3      # Words shorter than this are not candidates

    # --- Interaction ---
    DEBOUNCE_DELAY: float = 0.15        # Seconds of idle input before matching

    # --- Storefront ---
    COUNTRIES: list[str] = ["IN", "AE", "UK"]
    CURRENCY_SYMBOLS: dict[str, str] = {
        "INR": "₹",
        "AED": "AED ",
        "GBP": "£",
    }

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    CATALOG_PATH: Path = Path(
        os.getenv(
            "JEWEL_SEARCH_CATALOG",
            str(BASE_DIR / "src" / "catalog" / "data" / "catalog.json"),
        )
    )
    LOGS_DIR: Path = BASE_DIR / "logs"
