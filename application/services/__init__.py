from .conversion_service import ConversionService
from .currency_service import CurrencyService
from .rate_service import RateService, cross_rate

__all__ = ['ConversionService', 'CurrencyService', 'RateService', 'cross_rate']
