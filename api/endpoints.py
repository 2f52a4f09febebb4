"""
Functional API endpoints for fetching data from external services.
"""

import logging
from datetime import datetime, timezone
from typing import List, Dict, Any

import requests

from config.constants import (
    KAMINO_API_URL,
    STAKING_YIELD_HISTORY_PATH,
    REQUEST_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)

# Create a persistent session for connection reuse
session = requests.Session()


def handle_api_error(error: Exception, api_name: str, fallback_value: Any) -> Any:
    """Common error handler for API requests."""
    if isinstance(error, requests.exceptions.Timeout):
        logger.error(f"{api_name} request timed out")
    elif isinstance(error, requests.exceptions.ConnectionError):
        logger.error(f"Failed to connect to {api_name}")
    elif isinstance(error, requests.exceptions.HTTPError):
        response = error.response
        status_code = getattr(response, "status_code", None)
        reason = getattr(response, "reason", "")
        logger.error(f"{api_name} HTTP error: {status_code}: {reason} ({error})")
    elif isinstance(error, requests.exceptions.RequestException):
        logger.error(f"{api_name} request failed: {str(error)}")
    elif isinstance(error, ValueError):
        logger.error(f"Error parsing {api_name} response: {str(error)}")
    else:
        logger.error(f"Error with {api_name}: {str(error)}")
    return fallback_value


def format_api_timestamp(moment: datetime) -> str:
    """Render a datetime as UTC ISO-8601 with milliseconds and a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_staking_yield_history_url(mint_address: str) -> str:
    return f"{KAMINO_API_URL}{STAKING_YIELD_HISTORY_PATH.format(mint_address=mint_address)}"


def fetch_staking_yield_history(mint_address: str, start: datetime, end: datetime) -> List[Dict[str, Any]]:
    """
    Fetch staking yield history for one LST mint from the Kamino API.

    Args:
        mint_address: Token mint address
        start: Window start
        end: Window end

    Returns:
        List of raw entries, each with at least {endBlockTime, apy}

    Raises:
        requests.exceptions.RequestException: on network failure or non-2xx status
        ValueError: if the body is not a JSON list
    """
    params = {
        "start": format_api_timestamp(start),
        "end": format_api_timestamp(end),
    }
    response = session.get(
        build_staking_yield_history_url(mint_address),
        params=params,
        timeout=REQUEST_TIMEOUT_SECONDS
    )
    response.raise_for_status()
    data = response.json()
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of history entries, got {type(data).__name__}")
    return data
