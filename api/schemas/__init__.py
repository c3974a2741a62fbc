from .responses import (
	ConversionResponse,
	ExchangeRateResponse,
	RatesResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ConversionResponse',
	'ExchangeRateResponse',
	'RatesResponse',
	'SupportedCurrenciesResponse',
]
