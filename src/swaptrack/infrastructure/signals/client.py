"""Client for the external prediction service.

The service is called with an empty POST and answers with
``{"prediction": "positive" | "negative", "tokenToBuy": "ETH"}``.
"""

from datetime import UTC, datetime
from typing import Any

from loguru import logger

from swaptrack.domain.models import MarketSignal, Prediction
from swaptrack.infrastructure.http import request_json
from swaptrack.shared.exceptions import ConfigurationError, SignalError

SOURCE = "Prediction service"


def parse_signal(
    payload: Any, default_token: str, received_at: datetime | None = None
) -> MarketSignal:
    """Build a MarketSignal from a prediction response

    A missing or blank ``tokenToBuy`` means ``default_token``.

    Raises:
        SignalError: If the body is not an object or the prediction is unknown
    """
    if not isinstance(payload, dict):
        raise SignalError(f"Invalid response structure from {SOURCE}")

    raw = payload.get("prediction")
    try:
        prediction = Prediction(raw.strip().lower())
    except (AttributeError, ValueError) as e:
        raise SignalError(f"Unknown prediction from {SOURCE}: {raw!r}") from e

    token = payload.get("tokenToBuy", payload.get("token_to_buy"))
    if isinstance(token, str) and token.strip():
        token = token.strip().upper()
    else:
        logger.debug(f"No token in prediction, using {default_token}")
        token = default_token

    return MarketSignal(
        prediction=prediction,
        token_to_buy=token,
        received_at=received_at or datetime.now(UTC),
    )


class PredictionClient:
    """Fetches directional signals from the configured prediction URL"""

    def __init__(
        self,
        url: str | None,
        default_token: str = "ETH",
        timeout: float | None = None,
    ):
        """Initialise prediction client

        Args:
            url: Prediction endpoint; None leaves the client unconfigured
            default_token: Token used when the response names none
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.url = url
        self.default_token = default_token
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "PredictionClient":
        return cls(
            config.signal_api_url,
            default_token=config.volatile_symbol,
            timeout=config.signal_timeout_seconds,
        )

    @property
    def configured(self) -> bool:
        return bool(self.url)

    def fetch_signal(self) -> MarketSignal:
        """Ask the service for the current signal

        Raises:
            ConfigurationError: If no URL is configured
            SignalError: On network errors, non-2xx status or a bad response
        """
        if not self.configured:
            raise ConfigurationError("SIGNAL_API_URL is not set")

        payload = request_json(
            "POST", self.url, SOURCE, SignalError, timeout=self.timeout
        )
        signal = parse_signal(payload, self.default_token)
        logger.info(
            f"Signal: {signal.prediction.value} on {signal.token_to_buy}"
        )
        return signal
