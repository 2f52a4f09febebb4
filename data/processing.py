"""
Data processing functions for transforming staking yield history into display metrics.
"""

import logging
from typing import List, Dict, Any

import pandas as pd

from config.constants import (
    APY_DECIMAL_PLACES,
    APY_NOT_AVAILABLE,
    PERCENTAGE_CONVERSION_FACTOR,
)
from data.models import TokenConfig, TokenMetrics

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ["end_block_time", "apy"]


def _parse_block_time(raw: Any) -> pd.Timestamp:
    """Epoch milliseconds or an ISO-8601 string, normalized to UTC."""
    if isinstance(raw, bool) or raw is None:
        raise ValueError(f"Invalid endBlockTime: {raw!r}")
    if isinstance(raw, (int, float)):
        return pd.to_datetime(raw, unit="ms", utc=True)
    return pd.to_datetime(raw, utc=True)


def history_to_dataframe(entries: List[Dict[str, Any]]) -> pd.DataFrame:
    """
    Convert raw staking yield history entries to a standardized DataFrame.

    This is the only place that knows the API field names.

    Args:
        entries: Raw entries with endBlockTime and apy (decimal fraction)

    Returns:
        DataFrame with end_block_time (UTC) and apy (float) columns,
        sorted ascending by end_block_time

    Raises:
        KeyError, TypeError, ValueError: if an entry is malformed
    """
    if not entries:
        return pd.DataFrame({
            "end_block_time": pd.Series(dtype="datetime64[ns, UTC]"),
            "apy": pd.Series(dtype="float64"),
        })

    records = [
        {
            "end_block_time": _parse_block_time(entry["endBlockTime"]),
            "apy": float(entry["apy"]),
        }
        for entry in entries
    ]
    df = pd.DataFrame(records, columns=HISTORY_COLUMNS)
    return df.sort_values("end_block_time", kind="stable").reset_index(drop=True)


def format_apy_percentage(decimal_rate: float) -> str:
    """
    Format a decimal APY as a percentage string.

    Args:
        decimal_rate: APY as decimal (e.g., 0.0712)

    Returns:
        Percentage string (e.g., "7.12%")
    """
    return f"{decimal_rate * PERCENTAGE_CONVERSION_FACTOR:.{APY_DECIMAL_PLACES}f}%"


def compute_token_metrics(
    token: TokenConfig,
    history_7d: pd.DataFrame,
    history_30d: pd.DataFrame
) -> TokenMetrics:
    """
    Derive current, 7-day and 30-day average APY for one token.

    Args:
        token: Token the histories belong to
        history_7d: 7-day window from history_to_dataframe
        history_30d: 30-day window from history_to_dataframe

    Returns:
        TokenMetrics; empty windows give "N/A"
    """
    current_apy = APY_NOT_AVAILABLE
    seven_day_avg_apy = APY_NOT_AVAILABLE
    thirty_day_avg_apy = APY_NOT_AVAILABLE

    if not history_7d.empty:
        ordered = history_7d.sort_values("end_block_time", kind="stable")
        current_apy = format_apy_percentage(ordered["apy"].iloc[-1])
        seven_day_avg_apy = format_apy_percentage(ordered["apy"].mean())
    else:
        logger.warning(f"No 7-day APY data found for {token.name} ({token.mint_address})")

    if not history_30d.empty:
        thirty_day_avg_apy = format_apy_percentage(history_30d["apy"].mean())
    else:
        logger.warning(f"No 30-day APY data found for {token.name} ({token.mint_address})")

    return TokenMetrics.from_token(token, current_apy, seven_day_avg_apy, thirty_day_avg_apy)
