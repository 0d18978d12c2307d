import logging
from typing import Any, Dict, Optional

from requests import RequestException

from .http_client import HttpClient

LOG = logging.getLogger(__name__)

COINGECKO_PRICE_URL = "https://api.coingecko.com/api/v3/simple/price"
FALLBACK_SOL_PRICE = 200.0


def parse_usd_price(body: Dict[str, Any], asset: str = "solana") -> float:
    try:
        return float(body[asset]["usd"])
    except (KeyError, TypeError):
        raise ValueError(f"price response missing {asset}.usd") from None


def fetch_sol_price(http: Optional[HttpClient] = None, url: str = COINGECKO_PRICE_URL) -> float:
    """Single-shot SOL/USD lookup for the startup log line.

    Any network or decoding failure yields FALLBACK_SOL_PRICE.
    """
    client = http or HttpClient()
    try:
        body = client.get_json(url, params={"ids": "solana", "vs_currencies": "usd"})
        return parse_usd_price(body)
    except (RequestException, ValueError) as exc:
        LOG.warning(f"SOL price lookup failed, using {FALLBACK_SOL_PRICE}: {exc}")
        return FALLBACK_SOL_PRICE
    finally:
        if http is None:
            client.close()
