"""
Streamlit components for the LST APY table.
"""

from typing import List

import streamlit as st

from config import get_lst_tokens
from config.constants import (
    EMPTY_STATE_MESSAGE,
    LOADING_MESSAGE,
    LST_COLUMNS,
    REFRESH_INTERVAL,
)
from data.aggregator import fetch_all_lst_metrics
from data.models import DashboardState, SortPreference, TokenMetrics
from utils.formatting import (
    create_lst_dataframe,
    find_highest_apy_index,
    format_lst_cells,
    format_sort_header,
    sort_lst_metrics,
)
from utils.refresh import RefreshController

CONTROLLER_KEY = "lst_refresh_controller"
SORT_KEY = "lst_sort_preference"


def refresh_all_lsts() -> List[TokenMetrics]:
    return fetch_all_lst_metrics(get_lst_tokens())


def get_refresh_controller() -> RefreshController:
    """Refresh lifecycle for this browser session, created on first display."""
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = RefreshController(refresh_all_lsts)
    return st.session_state[CONTROLLER_KEY]


def get_sort_preference() -> SortPreference:
    if SORT_KEY not in st.session_state:
        st.session_state[SORT_KEY] = SortPreference()
    return st.session_state[SORT_KEY]


def _on_sort_click(column: str) -> None:
    st.session_state[SORT_KEY] = get_sort_preference().toggle(column)


def display_sort_headers(preference: SortPreference) -> None:
    """Clickable column headers; the active one shows its direction."""
    header_cols = st.columns(len(LST_COLUMNS))
    for header_col, column in zip(header_cols, LST_COLUMNS):
        with header_col:
            st.button(
                format_sort_header(column, preference),
                key=f"sort_{column}",
                on_click=_on_sort_click,
                args=(column,),
                use_container_width=True
            )


def display_lst_table(rows: List[TokenMetrics], preference: SortPreference) -> None:
    """
    Display sorted LST rows with the highest current APY highlighted.

    Rows use the same column layout as the sort headers.

    Args:
        rows: Rows in configuration order
        preference: Active sort preference
    """
    sorted_rows = sort_lst_metrics(rows, preference)
    highest_index = find_highest_apy_index(sorted_rows)
    df = create_lst_dataframe(sorted_rows, highest_index)

    display_sort_headers(preference)
    for row_cells in format_lst_cells(df, highest_index):
        for cell_col, cell in zip(st.columns(len(LST_COLUMNS)), row_cells):
            cell_col.markdown(cell)


def display_dashboard_state(state: DashboardState) -> None:
    """Render banner, empty state or table for the latest refresh."""
    if state.error:
        st.error(f"**Error!** {state.error}")
        return

    rows = state.rows or []
    if not rows:
        st.info(EMPTY_STATE_MESSAGE)
        return

    display_lst_table(rows, get_sort_preference())

    if state.refreshed_at is not None:
        st.caption(f"Last refreshed {state.refreshed_at:%Y-%m-%d %H:%M:%S} UTC")


@st.fragment(run_every=REFRESH_INTERVAL)
def display_lst_dashboard() -> None:
    """Auto-refreshing dashboard body; reruns on its own every refresh interval."""
    controller = get_refresh_controller()
    body = st.empty()

    if controller.should_refresh():
        # Drop the previous table so only the spinner shows while fetching
        body.empty()
        with st.spinner(LOADING_MESSAGE):
            controller.refresh()

    with body.container():
        display_dashboard_state(controller.state)
