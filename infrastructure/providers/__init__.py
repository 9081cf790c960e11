from .walutomat import WalutomatRatesProvider

__all__ = ['WalutomatRatesProvider']
