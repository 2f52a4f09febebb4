# API package for external service clients

from .endpoints import (
    fetch_staking_yield_history,
    handle_api_error
)

__all__ = [
    'fetch_staking_yield_history',
    'handle_api_error'
]
