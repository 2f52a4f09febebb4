"""
Data models for the LST APY comparison dashboard.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Dict, List, Optional

from config.constants import APY_ERROR, LST_COLUMNS

SORT_ASCENDING = "asc"
SORT_DESCENDING = "desc"


@dataclass(frozen=True)
class TokenConfig:
    """A configured liquid staking token."""
    name: str
    mint_address: str
    website: str

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> 'TokenConfig':
        """Create TokenConfig from a raw config dictionary."""
        return cls(
            name=data["name"],
            mint_address=data["mint"],
            website=data.get("website", "")
        )


@dataclass(frozen=True)
class TokenMetrics:
    """A row in the LST APY display table."""
    name: str
    mint_address: str
    website: str
    current_apy: str
    seven_day_avg_apy: str
    thirty_day_avg_apy: str

    @classmethod
    def from_token(
        cls,
        token: TokenConfig,
        current_apy: str,
        seven_day_avg_apy: str,
        thirty_day_avg_apy: str
    ) -> 'TokenMetrics':
        """Attach computed metrics to a token."""
        return cls(
            name=token.name,
            mint_address=token.mint_address,
            website=token.website,
            current_apy=current_apy,
            seven_day_avg_apy=seven_day_avg_apy,
            thirty_day_avg_apy=thirty_day_avg_apy
        )

    @classmethod
    def error(cls, token: TokenConfig) -> 'TokenMetrics':
        """Metrics for a token whose fetch or parse failed."""
        return cls.from_token(token, APY_ERROR, APY_ERROR, APY_ERROR)

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for DataFrame creation."""
        return {
            "LST": self.name,
            "Website": self.website,
            "Current APY": self.current_apy,
            "7-Day Avg APY": self.seven_day_avg_apy,
            "30-Day Avg APY": self.thirty_day_avg_apy
        }


@dataclass(frozen=True)
class SortPreference:
    """Active table sort column and direction."""
    column: Optional[str] = None
    direction: str = SORT_ASCENDING

    def __post_init__(self):
        if self.column is not None and self.column not in LST_COLUMNS:
            raise ValueError(f"Unknown sort column: {self.column}")
        if self.direction not in (SORT_ASCENDING, SORT_DESCENDING):
            raise ValueError(f"Unknown sort direction: {self.direction}")

    @property
    def descending(self) -> bool:
        return self.direction == SORT_DESCENDING

    def toggle(self, column: str) -> 'SortPreference':
        """
        Apply a header click.

        Clicking the active column flips direction; any other column
        becomes active in ascending order.
        """
        if self.column == column:
            flipped = SORT_ASCENDING if self.descending else SORT_DESCENDING
            return replace(self, direction=flipped)
        return SortPreference(column=column, direction=SORT_ASCENDING)


@dataclass
class DashboardState:
    """Outcome of the latest refresh cycle."""
    rows: Optional[List[TokenMetrics]] = None
    error: Optional[str] = None
    refreshed_at: Optional[datetime] = None

    @property
    def loaded(self) -> bool:
        return self.rows is not None or self.error is not None
