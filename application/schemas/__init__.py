from .responses import ExchangeRateResponse

__all__ = ['ExchangeRateResponse']
