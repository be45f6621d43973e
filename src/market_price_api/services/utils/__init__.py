"""Service helpers."""
from market_price_api.services.utils.params import parse_symbols_param

__all__ = ["parse_symbols_param"]
