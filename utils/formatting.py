"""
Utility functions for sorting, highlighting and formatting the LST table.
"""

import math
from typing import List, Optional

import pandas as pd

from config.constants import (
    HIGHEST_BADGE,
    HIGHLIGHT_COLOR,
    LST_COLUMNS,
    WEBSITE_COLUMN,
)
from data.models import SortPreference, TokenMetrics

SORT_INDICATORS = {
    False: "▲",
    True: "▼",
}


def parse_apy_value(value: str) -> Optional[float]:
    """
    Parse a percentage string like "7.12%" into a float.

    Returns:
        7.12, or None for sentinels such as "N/A", "Error" and "nan%"
    """
    try:
        parsed = float(value.replace("%", "").strip())
    except (AttributeError, ValueError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def _name_sort_key(row: TokenMetrics):
    # Case-insensitive first; on ties lowercase sorts before uppercase
    return (row.name.casefold(), row.name.swapcase())


def _apy_sort_key(column: str):
    def key(row: TokenMetrics) -> float:
        # Sentinels order as 0 but keep their display text
        value = parse_apy_value(getattr(row, column))
        return 0.0 if value is None else value
    return key


def sort_lst_metrics(rows: List[TokenMetrics], preference: SortPreference) -> List[TokenMetrics]:
    """
    Sort table rows by the active column.

    Args:
        rows: Rows in configuration order
        preference: Active sort column and direction

    Returns:
        New sorted list; configuration order when no column is active
    """
    if preference.column is None:
        return list(rows)

    if preference.column == "name":
        key = _name_sort_key
    else:
        key = _apy_sort_key(preference.column)

    return sorted(rows, key=key, reverse=preference.descending)


def find_highest_apy_index(rows: List[TokenMetrics]) -> Optional[int]:
    """
    Find the row with the greatest current APY in display order.

    Only positive values qualify; non-numeric values are skipped and on
    ties the first row wins.
    """
    highest_index = None
    highest_value = 0.0
    for index, row in enumerate(rows):
        value = parse_apy_value(row.current_apy)
        if value is not None and value > highest_value:
            highest_index = index
            highest_value = value
    return highest_index


def format_sort_header(column: str, preference: SortPreference) -> str:
    """Header label with an arrow when the column is the active sort."""
    label = LST_COLUMNS[column]
    if preference.column == column:
        return f"{label} {SORT_INDICATORS[preference.descending]}"
    return label


def create_lst_dataframe(
    rows: List[TokenMetrics],
    highest_index: Optional[int] = None
) -> pd.DataFrame:
    """
    Create DataFrame for the LST table, badging the highest row.

    Args:
        rows: Rows in display order
        highest_index: Position of the highest current APY row

    Returns:
        DataFrame with a 0..n-1 index matching display order
    """
    columns = [LST_COLUMNS["name"], WEBSITE_COLUMN] + [
        LST_COLUMNS[key] for key in ("current_apy", "seven_day_avg_apy", "thirty_day_avg_apy")
    ]
    df = pd.DataFrame([row.to_dict() for row in rows], columns=columns)

    if highest_index is not None and 0 <= highest_index < len(df):
        current_col = LST_COLUMNS["current_apy"]
        df.loc[highest_index, current_col] = f"{df.loc[highest_index, current_col]}  {HIGHEST_BADGE}"

    return df


def format_lst_cells(df: pd.DataFrame, highest_index: Optional[int] = None) -> List[List[str]]:
    """
    Convert the LST DataFrame into Markdown cells, one list per row.

    The name links to the token website and every cell of the highest
    row gets a highlighted background. Cells follow LST_COLUMNS order.

    Returns:
        Rows of Markdown strings ready for st.markdown()
    """
    value_columns = [LST_COLUMNS[key] for key in ("current_apy", "seven_day_avg_apy", "thirty_day_avg_apy")]
    cells = []
    for index, record in df.iterrows():
        name = f"[{record[LST_COLUMNS['name']]}]({record[WEBSITE_COLUMN]})"
        row = [name] + [str(record[col]) for col in value_columns]
        if index == highest_index:
            row = [f":{HIGHLIGHT_COLOR}-background[**{cell}**]" for cell in row]
        cells.append(row)
    return cells
