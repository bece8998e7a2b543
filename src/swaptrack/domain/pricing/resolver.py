"""Execution price resolution from swap amounts.

The price is always derived from the executed amounts of the swap itself,
so it reflects slippage and fees. There is deliberately no fallback to an
external price feed here.
"""

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from loguru import logger

from swaptrack.domain.models import SwapDirection, SwapResult, TokenPair
from swaptrack.shared.exceptions import PriceUnavailable


@dataclass(frozen=True)
class AssetSymbols:
    """Stable reference asset and volatile traded asset"""

    stable: str = "USDC"
    volatile: str = "ETH"


def classify_swap(
    pair: TokenPair, symbols: AssetSymbols | None = None
) -> SwapDirection | None:
    """Classify a swap as buy-direction or sell-direction.

    Args:
        pair: Token pair of the swap
        symbols: Stable/volatile symbols (defaults to USDC/ETH)

    Returns:
        SwapDirection, or None if the pair is not stable<->volatile
    """
    symbols = symbols or AssetSymbols()
    from_symbol = pair.from_symbol.upper()
    to_symbol = pair.to_symbol.upper()
    stable = symbols.stable.upper()
    volatile = symbols.volatile.upper()

    if from_symbol == stable and to_symbol == volatile:
        return SwapDirection.BUY
    if from_symbol == volatile and to_symbol == stable:
        return SwapDirection.SELL
    return None


def parse_amount(value: str | None, label: str) -> Decimal:
    """Parse a decimal-string swap amount.

    Raises:
        PriceUnavailable: If the amount is missing, unparsable,
            non-finite or not positive
    """
    if value is None or not str(value).strip():
        raise PriceUnavailable(f"Swap {label} is missing")

    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as e:
        raise PriceUnavailable(
            f"Swap {label} is not a number: {value!r}"
        ) from e

    if not amount.is_finite() or amount <= 0:
        raise PriceUnavailable(f"Swap {label} must be positive: {value!r}")

    return amount


def resolve_price(
    swap: SwapResult, pair: TokenPair, symbols: AssetSymbols | None = None
) -> float:
    """Compute the unit price of the volatile asset from a swap.

    price = stable amount / volatile amount

    Args:
        swap: Completed swap result
        pair: Token pair of the swap
        symbols: Stable/volatile symbols (defaults to USDC/ETH)

    Returns:
        Positive unit price in stable-asset terms

    Raises:
        PriceUnavailable: If the pair is unsupported or amounts are invalid
    """
    direction = classify_swap(pair, symbols)
    if direction is None:
        raise PriceUnavailable(f"Unsupported token pair: {pair}")

    from_amount = parse_amount(swap.from_amount, "fromAmount")
    to_amount = parse_amount(swap.to_amount, "toAmount")

    if direction is SwapDirection.BUY:
        stable_amount, volatile_amount = from_amount, to_amount
    else:
        stable_amount, volatile_amount = to_amount, from_amount

    price = float(stable_amount / volatile_amount)
    if not math.isfinite(price) or price <= 0:
        raise PriceUnavailable(f"Computed price is not usable: {price}")

    logger.debug(
        f"Exact swap price ({pair}): stable={stable_amount} "
        f"volatile={volatile_amount} price={price}"
    )
    return price
