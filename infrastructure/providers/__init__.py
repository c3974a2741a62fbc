from .bankofisrael import BankOfIsraelProvider
from .base import ExchangeRateProvider

__all__ = ['BankOfIsraelProvider', 'ExchangeRateProvider']
