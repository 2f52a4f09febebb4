# Config package for LST dashboard constants and configuration

# Make get_lst_tokens easily importable
from .config_loader import get_lst_tokens, clear_config_cache

__all__ = ['get_lst_tokens', 'clear_config_cache']
