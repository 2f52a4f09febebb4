"""Test configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from config.constants import LST_TOKENS
from data.models import TokenConfig, TokenMetrics

NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_history(*apys, end=NOW, step_hours=24):
    """Raw API entries, oldest first, one per apy value."""
    count = len(apys)
    return [
        {
            "endBlockTime": (end - timedelta(hours=step_hours * (count - 1 - i))).isoformat().replace("+00:00", "Z"),
            "apy": str(apy),
        }
        for i, apy in enumerate(apys)
    ]


def make_row(name, current="N/A", seven="N/A", thirty="N/A"):
    return TokenMetrics(
        name=name,
        mint_address=f"{name}-mint",
        website=f"https://{name.lower()}.example",
        current_apy=current,
        seven_day_avg_apy=seven,
        thirty_day_avg_apy=thirty,
    )


def window_label(start, end):
    return "7d" if (end - start).days == 7 else "30d"


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def lst_tokens():
    """The five configured LSTs."""
    return [TokenConfig.from_dict(raw) for raw in LST_TOKENS]


@pytest.fixture
def jitosol(lst_tokens):
    return lst_tokens[0]
