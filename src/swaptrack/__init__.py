"""swaptrack - swap-to-position reconciliation and P&L tracking"""

__version__ = "0.1.0"
