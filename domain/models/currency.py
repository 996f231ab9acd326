from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from domain.exceptions.currency import InvalidCurrencyError


class LanguageCode(str, Enum):
    EN = "EN"
    CZ = "CZ"


@dataclass(frozen=True)
class Currency:
    code: str

    def __post_init__(self):
        if not isinstance(self.code, str) or not self.code:
            raise InvalidCurrencyError(f"Currency code must be a non-empty string, got {self.code!r}")

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class RawRateQuote:
    """One published rate: `amount` units of `currency_code` cost `rate` target units."""
    currency_code: str
    rate: Decimal
    amount: int = 1

    def __post_init__(self):
        if isinstance(self.amount, bool) or not isinstance(self.amount, int) or self.amount < 1:
            raise ValueError(f"amount must be a positive integer, got {self.amount!r}")


@dataclass(frozen=True)
class ComputedRate:
    source_currency: Currency
    target_currency: Currency
    value: Decimal  # rate per single unit of source_currency

    def __str__(self) -> str:
        return f"{self.source_currency}/{self.target_currency}={self.value}"
