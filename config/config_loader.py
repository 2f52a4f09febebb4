"""
Token configuration management with singleton pattern.
"""

from typing import Dict, Tuple, Any

from config.constants import LST_TOKENS

# Global cache for token configuration
_CONFIG_CACHE: Dict[str, Tuple[Any, ...]] = {}

def get_lst_tokens() -> Tuple[Any, ...]:
    """
    Get cached LST configuration. Built once, used everywhere.

    Returns:
        Tuple of TokenConfig in display order
    """
    if 'data' not in _CONFIG_CACHE:
        from data.models import TokenConfig
        _CONFIG_CACHE['data'] = tuple(TokenConfig.from_dict(raw) for raw in LST_TOKENS)

    return _CONFIG_CACHE['data']

def clear_config_cache():
    """Clear cache for testing purposes."""
    _CONFIG_CACHE.clear()
