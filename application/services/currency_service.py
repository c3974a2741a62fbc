import logging
from collections.abc import Iterable

from domain.exceptions.currency import UnknownCurrencyError
from domain.models.currency import RateTable
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class CurrencyService:
    def __init__(self, provider: ExchangeRateProvider):
        self.provider = provider

    async def get_supported_currencies(self) -> list[str]:
        table = await self.provider.fetch_rate_table()
        return table.codes

    def validate_currencies(self, codes: Iterable[str], table: RateTable) -> None:
        """Raise UnknownCurrencyError for the first code the table does not quote."""
        for code in codes:
            if code not in table:
                logger.warning(f"Currency {code} is not quoted by {self.provider.name}")
                raise UnknownCurrencyError(code)
