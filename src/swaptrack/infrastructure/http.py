"""JSON-over-HTTP helper shared by external service clients"""

from typing import Any

import requests
from loguru import logger

from swaptrack.shared.exceptions import SwaptrackError

# Longest error body quoted back to the user
MAX_ERROR_BODY = 200


def request_json(
    method: str,
    url: str,
    source: str,
    error: type[SwaptrackError],
    params: dict[str, Any] | None = None,
    timeout: float | None = None,
) -> Any:
    """Send a request and decode its JSON body.

    No retry is attempted; callers decide what to do with a failure.

    Args:
        method: HTTP method, e.g. "GET" or "POST"
        url: Endpoint URL
        source: Service name for messages
        error: Exception type raised on failure
        params: Query string parameters
        timeout: Request timeout in seconds (None waits indefinitely)

    Raises:
        error: On network errors, non-2xx status or invalid JSON
    """
    try:
        response = requests.request(
            method,
            url,
            params=params,
            headers={"Accept": "application/json"},
            timeout=timeout,
        )
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        failed = e.response
        status = failed.status_code if failed is not None else None
        reason = failed.reason if failed is not None else ""
        body = failed.text.strip()[:MAX_ERROR_BODY] if failed is not None else ""
        logger.error(f"{source} returned HTTP error: {e}")
        message = f"{source} returned status {status} {reason}".rstrip()
        raise error(f"{message}: {body}" if body else message) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"{source} request failed: {e}")
        raise error(f"{source} request failed: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        logger.error(f"{source} returned invalid JSON: {e}")
        raise error(f"Invalid response body from {source}") from e
