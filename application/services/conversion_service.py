from domain.models.currency import ConvertResult

from application.services.currency_service import CurrencyService
from application.services.rate_service import RateService, cross_rate, unrounded_cross_rate

AMOUNT_DIGITS = 2


class ConversionService:
    def __init__(self, rate_service: RateService, currency_service: CurrencyService):
        self.rate_service = rate_service
        self.currency_service = currency_service

    async def convert(self, from_currency: str, to_currency: str, amount: float = 1) -> ConvertResult:
        table = await self.rate_service.get_rate_table()
        self.currency_service.validate_currencies((from_currency, to_currency), table)

        from_quote = table.get(from_currency)
        to_quote = table.get(to_currency)
        rate = cross_rate(from_quote, to_quote)

        return ConvertResult(
            from_currency=rate.from_currency,
            to_currency=rate.to_currency,
            rate=rate.rate,
            updated_at=rate.updated_at,
            amount=amount,
            value=round(amount * unrounded_cross_rate(from_quote, to_quote), AMOUNT_DIGITS),
        )
