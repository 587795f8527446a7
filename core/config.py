"""Settings for the stock data client.

Values come from the environment so keys never live in the source tree.
"""

import os

ALPHA_VANTAGE_API_KEY_ENV = "ALPHA_VANTAGE_API_KEY"
ALPHA_VANTAGE_BASE_URL = "https://www.alphavantage.co/query"

# Free tier allows 5 calls/minute; 2s spacing keeps bursts of 3-4 calls safe.
MIN_DELAY_SECONDS = float(os.getenv("ALPHA_VANTAGE_MIN_DELAY", "2.0"))
REQUEST_TIMEOUT_SECONDS = 30


def get_api_key() -> str:
    """Return the Alpha Vantage key, falling back to the public ``demo`` key."""
    return (os.getenv(ALPHA_VANTAGE_API_KEY_ENV) or "demo").strip()
