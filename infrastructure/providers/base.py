from typing import Protocol, runtime_checkable

from domain.models.currency import RateTable


@runtime_checkable
class ExchangeRateProvider(Protocol):
    """Source of the full quote table the rate services compute from."""

    @property
    def name(self) -> str: ...

    async def fetch_rate_table(self) -> RateTable: ...

    async def close(self) -> None: ...
