import logging
from collections.abc import Sequence

from domain.exceptions.currency import ProviderError
from domain.models.currency import ComputedRate, Currency, RawRateQuote
from infrastructure.providers.base import RateSourceFactory

logger = logging.getLogger(__name__)


class RateProvider:
    """Computes per-unit rates of requested currencies into a target currency.

    Currencies the source does not quote are left out of the result rather
    than reported. Failures of the rate source propagate to the caller, so a
    call returns either every available rate or nothing at all.
    """

    def __init__(self, source_factory: RateSourceFactory):
        self.source_factory = source_factory

    async def compute(
        self, requested_currencies: Sequence[Currency], target_currency_code: str
    ) -> list[ComputedRate]:
        if not requested_currencies:
            return []

        target = Currency(target_currency_code)
        source = self.source_factory.create(target_currency_code)
        quotes = await source.fetch_daily()

        requested = {currency.code: currency for currency in requested_currencies}
        matched = self._match_quotes(quotes, requested)

        logger.debug(
            f"Matched {len(matched)} of {len(requested)} requested currencies "
            f"against {len(quotes)} quotes into {target_currency_code}"
        )

        return [
            ComputedRate(
                source_currency=requested[quote.currency_code],
                target_currency=target,
                value=quote.rate / quote.amount,
            )
            for quote in matched
        ]

    @staticmethod
    def _match_quotes(
        quotes: Sequence[RawRateQuote], requested: dict[str, Currency]
    ) -> list[RawRateQuote]:
        matched: dict[str, RawRateQuote] = {}
        for quote in quotes:
            if quote.currency_code not in requested:
                continue
            if quote.currency_code in matched:
                raise ProviderError(f"Rate source quoted {quote.currency_code} more than once")
            matched[quote.currency_code] = quote
        return list(matched.values())
