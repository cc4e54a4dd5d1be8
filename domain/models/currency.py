from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType

BASE_CURRENCY = 'USD'


class Currency(str, Enum):
    USD = 'USD'
    GBP = 'GBP'
    JPY = 'JPY'


class ServedFrom(str, Enum):
    CACHE = 'cache'
    UPSTREAM = 'upstream'


@dataclass(frozen=True)
class RateSnapshot:
    """USD-denominated quotes (units of each currency per 1 USD) at one instant."""

    base: str
    timestamp: int  # upstream-reported, seconds since epoch
    rates: Mapping[str, Decimal]

    def __post_init__(self):
        object.__setattr__(self, 'rates', MappingProxyType(dict(self.rates)))


@dataclass(frozen=True)
class CacheEntry:
    snapshot: RateSnapshot
    fetched_at: int
    expires_at: int


@dataclass(frozen=True)
class ConversionRequest:
    currency: Currency
    amount: str


@dataclass(frozen=True)
class ResolvedRate:
    btc_per_unit: Decimal
    as_of_unix: int
    served_from: ServedFrom
    fetched_at_unix: int
    ttl_seconds_remaining: int


@dataclass(frozen=True)
class ConversionResult:
    request: ConversionRequest
    btc_amount: str
    btc_per_unit: str  # 12 significant digits, display only
    as_of_unix: int
    served_from: ServedFrom
    fetched_at_unix: int
    ttl_seconds_remaining: int
