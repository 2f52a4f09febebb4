"""
Streamlit application comparing APY across Solana liquid staking tokens.
"""

import logging

import streamlit as st

from config.constants import (
    APP_TITLE,
    FOOTER_MESSAGE,
    LOG_FORMAT,
    LOG_LEVEL,
    PAGE_TITLE
)
from utils.lst_table_ui import display_lst_dashboard


def main():
    """Main application logic."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    st.set_page_config(page_title=PAGE_TITLE, layout="centered")
    st.title(APP_TITLE)

    # === AUTO-REFRESHING TABLE ===
    display_lst_dashboard()

    st.caption(FOOTER_MESSAGE)


if __name__ == "__main__":
    main()
