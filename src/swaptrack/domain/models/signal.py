"""Directional market signal from the prediction service"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .swap import SwapDirection, TokenPair


class Prediction(Enum):
    """Expected move of the volatile asset"""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    @property
    def direction(self) -> SwapDirection:
        if self is Prediction.POSITIVE:
            return SwapDirection.BUY
        return SwapDirection.SELL


@dataclass(frozen=True)
class MarketSignal:
    """A prediction and the asset it applies to"""

    prediction: Prediction
    token_to_buy: str
    received_at: datetime

    @property
    def direction(self) -> SwapDirection:
        return self.prediction.direction

    def suggested_pair(self, stable_symbol: str) -> TokenPair:
        """Swap that acts on the signal

        Positive: stable -> token. Negative: token -> stable.
        """
        if self.direction is SwapDirection.BUY:
            return TokenPair(stable_symbol, self.token_to_buy)
        return TokenPair(self.token_to_buy, stable_symbol)
