"""Shared HTTP handling for price feed providers"""

import math
from typing import Any

from swaptrack.infrastructure.http import request_json
from swaptrack.shared.exceptions import PriceFeedError


def fetch_json(
    url: str,
    source: str,
    params: dict[str, Any] | None = None,
    timeout: float | None = None,
) -> Any:
    """GET a provider URL and decode its JSON body

    Raises:
        PriceFeedError: On network errors, non-2xx status or invalid JSON
    """
    return request_json(
        "GET", url, source, PriceFeedError, params=params, timeout=timeout
    )


def parse_price(value: Any, source: str) -> float:
    """Convert a raw price field into a positive float

    Raises:
        PriceFeedError: If the value is missing, unparsable or not positive
    """
    if value is None or isinstance(value, bool):
        raise PriceFeedError(f"Invalid response structure from {source}")
    try:
        price = float(value)
    except (TypeError, ValueError) as e:
        raise PriceFeedError(f"Invalid price from {source}: {value!r}") from e
    if not math.isfinite(price) or price <= 0:
        raise PriceFeedError(f"Invalid price from {source}: {value!r}")
    return price
