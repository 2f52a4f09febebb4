"""
Configuration constants for the LST APY comparison dashboard.
Token list and refresh period are fixed at build time.
"""

import logging
from datetime import timedelta

# Kamino Finance staking-yields API
KAMINO_API_URL = "https://api.kamino.finance"
STAKING_YIELD_HISTORY_PATH = "/staking-yields/tokens/{mint_address}/history"
REQUEST_TIMEOUT_SECONDS = 12

# Both windows end "now"; keys double as TokenMetrics field prefixes
HISTORY_WINDOWS = {
    "7d": 7,
    "30d": 30,
}

# Two history calls per token run side by side
MAX_FETCH_WORKERS = 10

# Auto refresh
REFRESH_INTERVAL = timedelta(minutes=10)
REFRESH_GRACE_SECONDS = 5

# Liquid staking tokens (single source)
LST_TOKENS = [
    {
        "name": "JitoSOL",
        "mint": "J1toso1uCk3RLmjorhTtrVwY9HJ7X8V9yYac6Y7kGCPn",
        "website": "https://www.jito.network/",
    },
    {
        "name": "mSOL",
        "mint": "mSoLzYCxHdYgdzU16g5K3z3KZK7ytfqcJm7So",
        "website": "https://marinade.finance/",
    },
    {
        "name": "JupSOL",
        "mint": "jupSoLaHXQiZZTSfEWMTRRgpnyFm8f6sZdosWBjx93v",
        "website": "https://jup.ag/stake-sol",
    },
    {
        "name": "dSOL",
        "mint": "Dso1bDeDjCQxTrWHqUUi63oBvV7Mdm6WaobLbQ7gnPQ",
        "website": "https://drift.trade/",
    },
    {
        "name": "bnSOL",
        "mint": "BNso1VUJnh4zcfpZa6986Ea66P6TCp59hvtNJ8b1X85",
        "website": "https://www.binance.com/en/solana-staking",
    },
]

# Metric sentinels
APY_NOT_AVAILABLE = "N/A"
APY_ERROR = "Error"

# Data processing constants
PERCENTAGE_CONVERSION_FACTOR = 100
APY_DECIMAL_PLACES = 2

# Sortable columns: internal key -> header label
LST_COLUMNS = {
    "name": "LST",
    "current_apy": "Current APY",
    "seven_day_avg_apy": "7-Day Avg APY",
    "thirty_day_avg_apy": "30-Day Avg APY",
}
WEBSITE_COLUMN = "Website"
HIGHEST_BADGE = "Highest!"
HIGHLIGHT_COLOR = "orange"

# UI Configuration
PAGE_TITLE = "LST APY Comparison"
APP_TITLE = "Solana Liquid Staking Token (LST) APY Comparison"
LOADING_MESSAGE = "Fetching latest APY data..."
BATCH_ERROR_MESSAGE = "Failed to fetch LST data. Please try again later."
EMPTY_STATE_MESSAGE = "No data available. Please check your internet connection or try again later."
FOOTER_MESSAGE = "Data refreshes automatically every 10 minutes. Click on column headers to sort."

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
