from dataclasses import dataclass, field


@dataclass(frozen=True)
class CountryRecord:
    currency_code: str
    border_codes: tuple[str, ...] = ()


@dataclass(frozen=True)
class BorderCountryRecord:
    name: str
    currency_code: str


@dataclass(frozen=True)
class RateTable:
    base_currency_code: str
    as_of_date: str
    rates: dict[str, float] = field(default_factory=dict)

    def rate_for(self, currency_code: str) -> float:
        # 0.0 marks a currency the table does not know about
        return self.rates.get(currency_code, 0.0)


@dataclass(frozen=True)
class AggregatedEntry:
    country_name: str
    currency_code: str
    rate: float


@dataclass(frozen=True)
class AggregationResult:
    base_currency_code: str
    entries: tuple[AggregatedEntry, ...] = ()


@dataclass(frozen=True)
class RateHistory:
    base_currency_code: str
    start_date: str
    end_date: str
    rates: dict[str, dict[str, float]] = field(default_factory=dict)


@dataclass(frozen=True)
class Diagnostic:
    exchangeratesapi: str
    restcountries: str
    version: str
    uptime: str
