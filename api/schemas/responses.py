from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from domain.models.currency import ConvertResult, CrossRate, RatesResult


class ExchangeRateResponse(BaseModel):
	model_config = ConfigDict(
		populate_by_name=True,
		json_schema_extra={
			'example': {
				'from': 'USD',
				'to': 'ILS',
				'rate': 3.712,
				'updatedAt': '2025-09-27T10:30:00Z',
			}
		},
	)

	from_currency: str = Field(..., alias='from', description='Source currency code')
	to_currency: str = Field(..., alias='to', description='Target currency code')
	rate: float = Field(..., description='Units of target currency per unit of source currency')
	updated_at: datetime = Field(..., alias='updatedAt', description='Oldest update time of the quotes used')

	@classmethod
	def from_domain(cls, rate: CrossRate) -> 'ExchangeRateResponse':
		return cls(
			from_currency=rate.from_currency,
			to_currency=rate.to_currency,
			rate=rate.rate,
			updated_at=rate.updated_at,
		)


class ConversionResponse(ExchangeRateResponse):
	model_config = ConfigDict(
		populate_by_name=True,
		json_schema_extra={
			'example': {
				'from': 'USD',
				'to': 'ILS',
				'rate': 3.712,
				'updatedAt': '2025-09-27T10:30:00Z',
				'amount': 100,
				'value': 371.2,
			}
		},
	)

	amount: float = Field(..., description='Amount requested')
	value: float = Field(..., description='Converted amount, rounded to 2 decimals')

	@classmethod
	def from_result(cls, result: ConvertResult) -> 'ConversionResponse':
		return cls(
			from_currency=result.from_currency,
			to_currency=result.to_currency,
			rate=result.rate,
			updated_at=result.updated_at,
			amount=result.amount,
			value=result.value,
		)


class RatesResponse(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	exchange_rates: list[ExchangeRateResponse] = Field(..., alias='exchangeRates')
	updated_at: datetime = Field(..., alias='updatedAt', description='Oldest update time in the whole table')

	@classmethod
	def from_result(cls, result: RatesResult) -> 'RatesResponse':
		return cls(
			exchange_rates=[ExchangeRateResponse.from_domain(rate) for rate in result.exchange_rates],
			updated_at=result.updated_at,
		)


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[str] = Field(description='List of currency codes')

	model_config = ConfigDict(json_schema_extra={'examples': [{'currencies': ['USD', 'EUR', 'GBP', 'ILS']}]})
