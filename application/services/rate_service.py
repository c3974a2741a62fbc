import logging

from domain.exceptions.currency import UnknownCurrencyError
from domain.models.currency import CrossRate, RateQuote, RatesResult, RateTable
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)

RATE_DIGITS = 8


def unrounded_cross_rate(from_quote: RateQuote, to_quote: RateQuote) -> float:
    # The feed quotes the home-currency price of `unit` foreign units.
    # `unit` divides on the from side and multiplies on the to side.
    return from_quote.rate / from_quote.unit / (to_quote.rate * to_quote.unit)


def cross_rate(from_quote: RateQuote, to_quote: RateQuote) -> CrossRate:
    """Exchange rate from one quoted currency to another.

    The result is only as fresh as the staler of the two quotes, so
    ``updated_at`` takes the earlier ``last_update``.
    """
    return CrossRate(
        from_currency=from_quote.code,
        to_currency=to_quote.code,
        rate=round(unrounded_cross_rate(from_quote, to_quote), RATE_DIGITS),
        updated_at=min(from_quote.last_update, to_quote.last_update),
    )


class RateService:
    def __init__(self, provider: ExchangeRateProvider):
        self.provider = provider

    async def get_rate_table(self) -> RateTable:
        return await self.provider.fetch_rate_table()

    async def get_rate(self, from_currency: str, to_currency: str) -> CrossRate:
        table = await self.get_rate_table()
        return self.rate_from_table(table, from_currency, to_currency)

    def rate_from_table(self, table: RateTable, from_currency: str, to_currency: str) -> CrossRate:
        from_quote = table.get(from_currency)
        if from_quote is None:
            raise UnknownCurrencyError(from_currency)
        to_quote = table.get(to_currency)
        if to_quote is None:
            raise UnknownCurrencyError(to_currency)
        return cross_rate(from_quote, to_quote)

    async def list_rates(self) -> RatesResult:
        table = await self.get_rate_table()

        # Grouped by destination currency, both directions of every pair
        rates = [
            cross_rate(from_quote, to_quote)
            for to_quote in table
            for from_quote in table
            if from_quote.code != to_quote.code
        ]

        logger.info(f"Computed {len(rates)} cross rates for {len(table)} currencies")
        return RatesResult(exchange_rates=rates, updated_at=table.oldest_update)
