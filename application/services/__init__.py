from .rate_service import DEFAULT_CURRENCY_PAIRS, RateCollector

__all__ = ['DEFAULT_CURRENCY_PAIRS', 'RateCollector']
