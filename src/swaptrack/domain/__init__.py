"""Domain layer for swaptrack

Pure Python models, pricing, P&L and repository protocols.
No infrastructure dependencies - domain layer only.
"""

from . import models, pricing, repositories

__all__ = ["models", "pricing", "repositories"]
