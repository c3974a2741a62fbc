from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from api.cache_control import cache_control_header
from api.dependencies import get_conversion_service, get_currency_service, get_rate_service
from api.schemas import (
	ConversionResponse,
	ExchangeRateResponse,
	RatesResponse,
	SupportedCurrenciesResponse,
)
from application.services import ConversionService, CurrencyService, RateService

router = APIRouter(prefix='/currency', tags=['currency'])


@router.get(
	'/exchange',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	response: Response,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
	from_currency: Annotated[str, Query(alias='from', min_length=1)],
	to_currency: Annotated[str, Query(alias='to', min_length=1)],
	amount: float = 1,
) -> ConversionResponse:
	result = await service.convert(from_currency.upper(), to_currency.upper(), amount)
	response.headers['Cache-Control'] = cache_control_header()
	return ConversionResponse.from_result(result)


@router.get(
	'/rate',
	response_model=ExchangeRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get current exchange rate',
)
async def get_exchange_rate(
	response: Response,
	service: Annotated[RateService, Depends(get_rate_service)],
	from_currency: Annotated[str, Query(alias='from', min_length=1)],
	to_currency: Annotated[str, Query(alias='to', min_length=1)],
) -> ExchangeRateResponse:
	rate = await service.get_rate(from_currency.upper(), to_currency.upper())
	response.headers['Cache-Control'] = cache_control_header()
	return ExchangeRateResponse.from_domain(rate)


@router.get(
	'/rates',
	response_model=RatesResponse,
	status_code=status.HTTP_200_OK,
	summary='List exchange rates between every pair of currencies',
)
async def list_exchange_rates(
	response: Response,
	service: Annotated[RateService, Depends(get_rate_service)],
) -> RatesResponse:
	result = await service.list_rates()
	response.headers['Cache-Control'] = cache_control_header()
	return RatesResponse.from_result(result)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	currencies = await service.get_supported_currencies()
	return SupportedCurrenciesResponse(currencies=currencies)
