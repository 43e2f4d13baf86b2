import logging
import requests
from decimal import Decimal

from .config import COINGECKO_SIMPLE_PRICE_URL, COINGECKO_IDS, PRICE_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_PRICES = {
    "aero": Decimal("1.50"),
    "eth":  Decimal("3300"),
    "btc":  Decimal("95000"),
}


def fetch_prices(session=None, timeout=PRICE_TIMEOUT):
    """
    Fetch USD prices for AERO, ETH and BTC via
    /simple/price?ids={comma-separated IDs}&vs_currencies=usd.
    Returns { "aero": Decimal, "eth": Decimal, "btc": Decimal }.

    Never raises: on any error the defaults are returned. A symbol missing
    from the response falls back to its own default.
    """
    http = session or requests
    params = {
        "ids": ",".join(COINGECKO_IDS.values()),
        "vs_currencies": "usd"
    }
    try:
        resp = http.get(COINGECKO_SIMPLE_PRICE_URL, params=params, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()

        # data is { id1: { "usd": price1 }, id2: { "usd": price2 }, ... }
        prices = {}
        for key, coin_id in COINGECKO_IDS.items():
            price = (data.get(coin_id) or {}).get("usd")
            prices[key] = Decimal(str(price)) if price else DEFAULT_PRICES[key]
    except Exception as e:
        logger.warning(f"⚠️  Could not fetch prices from CoinGecko ({e}). Using defaults.")
        return dict(DEFAULT_PRICES)
    return prices
