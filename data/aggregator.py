"""
Concurrent aggregation of LST staking yields into table rows.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from api.endpoints import fetch_staking_yield_history, handle_api_error
from config.constants import APY_ERROR, HISTORY_WINDOWS, MAX_FETCH_WORKERS
from data.models import TokenConfig, TokenMetrics
from data.processing import compute_token_metrics, history_to_dataframe

logger = logging.getLogger(__name__)

HistoryFetcher = Callable[[str, datetime, datetime], list]


def build_history_windows(now: Optional[datetime] = None) -> Dict[str, Tuple[datetime, datetime]]:
    """
    Build the history windows, all ending at ``now``.

    Returns:
        Mapping of window label ("7d", "30d") to (start, end)
    """
    now = now or datetime.now(timezone.utc)
    return {
        label: (now - timedelta(days=days), now)
        for label, days in HISTORY_WINDOWS.items()
    }


def _collect_token_metrics(token: TokenConfig, futures: Dict[str, Future]) -> TokenMetrics:
    """Turn one token's finished fetches into a row; any failure marks the whole row as Error."""
    try:
        histories = {label: history_to_dataframe(future.result()) for label, future in futures.items()}
        return compute_token_metrics(token, histories["7d"], histories["30d"])
    except Exception as e:
        return handle_api_error(e, f"Staking yields for {token.name}", TokenMetrics.error(token))


def fetch_all_lst_metrics(
    tokens: Iterable[TokenConfig],
    now: Optional[datetime] = None,
    fetch_history: HistoryFetcher = fetch_staking_yield_history,
    max_workers: int = MAX_FETCH_WORKERS
) -> List[TokenMetrics]:
    """
    Fetch and aggregate APY metrics for every token concurrently.

    Every history request (two per token) is submitted to one pool, so the
    7-day and 30-day calls of a token overlap each other and other tokens.
    Returns only after all requests have finished.

    Args:
        tokens: Configured tokens
        now: End of both history windows (defaults to current UTC time)
        fetch_history: Callable(mint_address, start, end) returning raw entries
        max_workers: Upper bound on concurrent requests

    Returns:
        One TokenMetrics per token, in input order
    """
    tokens = list(tokens)
    if not tokens:
        return []

    windows = build_history_windows(now)
    workers = max(1, min(max_workers, len(tokens) * len(windows)))

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="lst-fetch") as executor:
        pending = [
            {
                label: executor.submit(fetch_history, token.mint_address, start, end)
                for label, (start, end) in windows.items()
            }
            for token in tokens
        ]
        results = [
            _collect_token_metrics(token, futures)
            for token, futures in zip(tokens, pending)
        ]

    failed = sum(1 for row in results if row.current_apy == APY_ERROR)
    logger.info(f"Aggregated APY metrics for {len(results)} LSTs ({failed} failed)")
    return results


def fetch_lst_metrics(
    token: TokenConfig,
    now: Optional[datetime] = None,
    fetch_history: HistoryFetcher = fetch_staking_yield_history
) -> TokenMetrics:
    """Fetch APY metrics for a single token. Never raises."""
    return fetch_all_lst_metrics([token], now=now, fetch_history=fetch_history)[0]
