from .rates import ExchangeRate

__all__ = ['ExchangeRate']
