import pytest

from config import clear_config_cache, get_lst_tokens
from data.models import DashboardState, SortPreference, TokenConfig, TokenMetrics


def test_token_config_from_dict():
    token = TokenConfig.from_dict({"name": "mSOL", "mint": "mint-1", "website": "https://marinade.finance/"})
    assert token == TokenConfig("mSOL", "mint-1", "https://marinade.finance/")


def test_get_lst_tokens_is_cached_and_ordered():
    clear_config_cache()
    tokens = get_lst_tokens()

    assert [t.name for t in tokens] == ["JitoSOL", "mSOL", "JupSOL", "dSOL", "bnSOL"]
    assert get_lst_tokens() is tokens
    assert len({t.mint_address for t in tokens}) == len(tokens)


def test_error_metrics_keep_token_fields():
    token = TokenConfig("dSOL", "mint-2", "https://drift.trade/")
    metrics = TokenMetrics.error(token)

    assert (metrics.name, metrics.mint_address, metrics.website) == ("dSOL", "mint-2", "https://drift.trade/")
    assert (metrics.current_apy, metrics.seven_day_avg_apy, metrics.thirty_day_avg_apy) == ("Error",) * 3


def test_sort_toggle_same_column_flips_direction():
    preference = SortPreference().toggle("current_apy")
    assert preference == SortPreference("current_apy", "asc")
    assert preference.toggle("current_apy") == SortPreference("current_apy", "desc")
    assert preference.toggle("current_apy").toggle("current_apy") == SortPreference("current_apy", "asc")


def test_sort_toggle_new_column_resets_to_ascending():
    preference = SortPreference("name", "desc").toggle("thirty_day_avg_apy")
    assert preference == SortPreference("thirty_day_avg_apy", "asc")


def test_sort_preference_rejects_unknown_column():
    with pytest.raises(ValueError):
        SortPreference(column="website")


def test_dashboard_state_loaded():
    assert not DashboardState().loaded
    assert DashboardState(rows=[]).loaded
    assert DashboardState(error="boom").loaded
