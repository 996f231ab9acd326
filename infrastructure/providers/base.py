from abc import ABC, abstractmethod

from domain.models.currency import LanguageCode, RawRateQuote


class RateSource(ABC):
    """A source publishing the full set of daily rates into one target currency."""

    @abstractmethod
    async def fetch_daily(self, language: LanguageCode = LanguageCode.EN) -> list[RawRateQuote]:
        """Fetch today's rates. The language hint never changes numeric values."""
        ...


class RateSourceFactory(ABC):
    """Binds a RateSource to the currency all of its rates convert into."""

    @abstractmethod
    def create(self, target_currency_code: str) -> RateSource:
        ...
