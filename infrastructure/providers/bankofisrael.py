import logging
from datetime import UTC, datetime

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from domain.exceptions.currency import MalformedResponseError, UpstreamUnavailableError
from domain.models.currency import RateQuote, RateTable

logger = logging.getLogger(__name__)


class BOIExchangeRate(BaseModel):
    """A single record of the GetExchangeRates payload, in upstream field names."""

    model_config = ConfigDict(populate_by_name=True)

    code: str = Field(alias="key", min_length=1)
    rate: float = Field(alias="currentExchangeRate", gt=0)
    change: float = Field(default=0.0, alias="currentChange")
    unit: int = Field(alias="unit", ge=1)
    last_update: datetime = Field(alias="lastUpdate")

    @field_validator("last_update", mode="before")
    @classmethod
    def parse_last_update(cls, v):
        # Upstream sends 7 fractional digits, which fromisoformat truncates
        if isinstance(v, str):
            v = datetime.fromisoformat(v)
        return v

    @field_validator("last_update")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        return v if v.tzinfo is not None else v.replace(tzinfo=UTC)

    def to_quote(self) -> RateQuote:
        return RateQuote(
            code=self.code,
            rate=self.rate,
            unit=self.unit,
            last_update=self.last_update,
            change=self.change,
        )


class BOIExchangeRatesResponse(BaseModel):
    exchange_rates: list[BOIExchangeRate] = Field(alias="exchangeRates")


class BankOfIsraelProvider:
    BASE_URL = "https://boi.org.il/PublicApi"
    RATES_ENDPOINT = "GetExchangeRates"

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10,
        local_currency: str = "ILS",
    ):
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.local_currency = local_currency
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def name(self) -> str:
        return "bankofisrael"

    def local_anchor(self) -> RateQuote:
        """The home currency quoted against itself, stamped with the current time."""
        return RateQuote(
            code=self.local_currency,
            rate=1.0,
            unit=1,
            last_update=datetime.now(UTC),
        )

    async def _request(self, endpoint: str, params: dict | None = None):
        url = f"{self.base_url}/{endpoint}"
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamUnavailableError(
                f"Bank of Israel HTTP error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise UpstreamUnavailableError(
                f"Bank of Israel request failed: {e.__class__.__name__}"
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Bank of Israel response is not valid JSON: {e}") from e

    def _parse_quotes(self, data) -> list[RateQuote]:
        try:
            if isinstance(data, list):
                records = [BOIExchangeRate.model_validate(item) for item in data]
            else:
                records = BOIExchangeRatesResponse.model_validate(data).exchange_rates
        except ValidationError as e:
            raise MalformedResponseError(
                f"Bank of Israel response parsing error: {e.error_count()} invalid field(s)"
            ) from e

        return [record.to_quote() for record in records]

    async def fetch_rate_table(self) -> RateTable:
        data = await self._request(self.RATES_ENDPOINT, {"asJson": "true"})
        quotes = self._parse_quotes(data)

        try:
            table = RateTable.from_quotes(quotes).with_anchor(self.local_anchor())
        except ValueError as e:
            raise MalformedResponseError(str(e)) from e

        logger.debug(f"Fetched {len(quotes)} quotes from {self.name}")
        return table

    async def close(self) -> None:
        await self._client.aclose()
