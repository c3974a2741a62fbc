"""
Shared fixtures: a small quote table and a provider that serves it without HTTP.
"""

from datetime import UTC, datetime

import pytest

from domain.exceptions.currency import UpstreamUnavailableError
from domain.models.currency import RateQuote, RateTable

T_USD = datetime(2025, 10, 1, 12, 0, tzinfo=UTC)
T_EUR = datetime(2025, 10, 2, 9, 30, tzinfo=UTC)
T_JPY = datetime(2025, 9, 30, 15, 0, tzinfo=UTC)


class StubProvider:
    """Serves a fixed table with a freshly stamped ILS anchor on every fetch."""

    def __init__(self, quotes: list[RateQuote] | None = None, error: Exception | None = None):
        self.quotes = quotes or []
        self.error = error
        self.fetch_count = 0

    @property
    def name(self) -> str:
        return "stub"

    async def fetch_rate_table(self) -> RateTable:
        self.fetch_count += 1
        if self.error is not None:
            raise self.error
        anchor = RateQuote(code="ILS", rate=1.0, unit=1, last_update=datetime.now(UTC))
        return RateTable.from_quotes(self.quotes).with_anchor(anchor)

    async def close(self) -> None:
        pass


@pytest.fixture
def quotes() -> list[RateQuote]:
    return [
        RateQuote(code="USD", rate=3.5, unit=1, last_update=T_USD, change=-0.12),
        RateQuote(code="EUR", rate=4.0, unit=1, last_update=T_EUR, change=0.3),
        RateQuote(code="JPY", rate=2.5, unit=100, last_update=T_JPY, change=0.0),
    ]


@pytest.fixture
def provider(quotes) -> StubProvider:
    return StubProvider(quotes)


@pytest.fixture
def failing_provider() -> StubProvider:
    return StubProvider(error=UpstreamUnavailableError("Bank of Israel HTTP error 503: Service Unavailable"))
