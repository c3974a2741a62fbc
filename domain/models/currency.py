from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class RateQuote:
    """One currency as quoted by the upstream feed.

    ``rate`` is the price of ``unit`` units of the currency in the home
    currency, so a quote of 2.5 per 100 JPY has ``rate=2.5, unit=100``.
    """

    code: str
    rate: float
    unit: int
    last_update: datetime
    change: float = 0.0


@dataclass(frozen=True)
class RateTable:
    quotes: tuple[RateQuote, ...] = ()
    _index: dict[str, RateQuote] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        index: dict[str, RateQuote] = {}
        for quote in self.quotes:
            if quote.code in index:
                raise ValueError(f"Duplicate currency code in rate table: {quote.code}")
            index[quote.code] = quote
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_quotes(cls, quotes: Iterable[RateQuote]) -> "RateTable":
        return cls(tuple(quotes))

    def with_anchor(self, anchor: RateQuote) -> "RateTable":
        return RateTable(self.quotes + (anchor,))

    @property
    def codes(self) -> list[str]:
        return [quote.code for quote in self.quotes]

    @property
    def oldest_update(self) -> datetime:
        if not self.quotes:
            raise ValueError("Rate table is empty")
        return min(quote.last_update for quote in self.quotes)

    def get(self, code: str) -> RateQuote | None:
        return self._index.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._index

    def __iter__(self) -> Iterator[RateQuote]:
        return iter(self.quotes)

    def __len__(self) -> int:
        return len(self.quotes)


@dataclass(frozen=True)
class CrossRate:
    from_currency: str
    to_currency: str
    rate: float
    updated_at: datetime


@dataclass(frozen=True)
class ConvertResult:
    from_currency: str
    to_currency: str
    rate: float
    updated_at: datetime
    amount: float
    value: float

    def __str__(self) -> str:
        return f"{self.amount} {self.from_currency} = {self.value} {self.to_currency}"


@dataclass(frozen=True)
class RatesResult:
    exchange_rates: list[CrossRate]
    updated_at: datetime
