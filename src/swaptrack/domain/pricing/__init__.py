"""Execution price and timestamp extraction from swap results"""

from .resolver import AssetSymbols, classify_swap, parse_amount, resolve_price
from .timestamps import resolve_timestamp

__all__ = [
    "AssetSymbols",
    "classify_swap",
    "parse_amount",
    "resolve_price",
    "resolve_timestamp",
]
