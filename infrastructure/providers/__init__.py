from .exchangerate_host import ExchangeRateHostProvider

__all__ = ['ExchangeRateHostProvider']
