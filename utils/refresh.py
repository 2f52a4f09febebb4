"""
Refresh lifecycle for the LST dashboard.
"""

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from config.constants import BATCH_ERROR_MESSAGE, REFRESH_GRACE_SECONDS, REFRESH_INTERVAL
from data.models import DashboardState, TokenMetrics

logger = logging.getLogger(__name__)


class RefreshController:
    """
    Owns the periodic refresh of one dashboard view.

    Created on first display and kept in the Streamlit session; the
    session ends the fragment timer when the view goes away. A refresh
    requested while another is still running is coalesced: the caller
    gets the current state and no second batch is started.
    """

    def __init__(
        self,
        refresh_fn: Callable[[], List[TokenMetrics]],
        interval: timedelta = REFRESH_INTERVAL,
        grace_seconds: float = REFRESH_GRACE_SECONDS
    ):
        """
        Args:
            refresh_fn: Produces the complete row set; may raise
            interval: Time between refreshes
            grace_seconds: Timer jitter tolerated when checking if a refresh is due
        """
        self._refresh_fn = refresh_fn
        self.interval = interval
        self.grace_seconds = grace_seconds
        self.state = DashboardState()
        self._lock = threading.Lock()

    @property
    def in_flight(self) -> bool:
        return self._lock.locked()

    def should_refresh(self, now: Optional[datetime] = None) -> bool:
        """True on first display and once the interval has elapsed."""
        if self.state.refreshed_at is None:
            return True
        now = now or datetime.now(timezone.utc)
        elapsed = (now - self.state.refreshed_at).total_seconds()
        return elapsed >= self.interval.total_seconds() - self.grace_seconds

    def refresh(self, now: Optional[datetime] = None) -> DashboardState:
        """
        Run one refresh cycle and replace the dashboard state.

        A batch-level failure yields a state with the error banner and no rows.
        """
        if not self._lock.acquire(blocking=False):
            logger.info("Refresh already in progress; keeping current state")
            return self.state

        try:
            now = now or datetime.now(timezone.utc)
            logger.info("Refreshing LST APY data")
            try:
                rows = list(self._refresh_fn())
                state = DashboardState(rows=rows, refreshed_at=now)
            except Exception:
                logger.exception("Error in LST refresh batch")
                state = DashboardState(error=BATCH_ERROR_MESSAGE, refreshed_at=now)
            self.state = state
            return state
        finally:
            self._lock.release()
