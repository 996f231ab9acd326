import logging
from decimal import Decimal, InvalidOperation

import httpx

from config.settings import Settings, get_settings
from domain.exceptions.currency import InvalidCurrencyError, ProviderError
from domain.models.currency import LanguageCode, RawRateQuote
from infrastructure.providers.base import RateSource, RateSourceFactory

logger = logging.getLogger(__name__)

CNB_TARGET_CURRENCY = "CZK"


class CzechNationalBankRateSource(RateSource):
    """Daily CZK rates published by the Czech National Bank.

    The HTTP client is shared with every other source the factory creates and
    is closed by its owner, never by the source.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        target_currency: str = CNB_TARGET_CURRENCY,
    ):
        self._client = client
        self.base_url = base_url.rstrip("/")
        self.target_currency = target_currency

    async def _request(self, endpoint: str, params: dict) -> dict:
        url = f"{self.base_url}/{endpoint}"
        response = await self._client.get(url, params=params)
        response.raise_for_status()
        return response.json()

    async def fetch_daily(self, language: LanguageCode = LanguageCode.EN) -> list[RawRateQuote]:
        try:
            data = await self._request("exrates/daily", {"lang": LanguageCode(language).value})
            return [self._parse_rate(entry) for entry in data["rates"]]

        except httpx.HTTPStatusError as e:
            logger.error("Failed to get daily exchange rates from bank API", exc_info=True)
            raise ProviderError(
                f"CNB HTTP error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            logger.error("Failed to get daily exchange rates from bank API", exc_info=True)
            raise ProviderError(f"CNB request failed: {e.__class__.__name__}") from e
        except Exception as e:
            logger.error("Failed to get daily exchange rates from bank API", exc_info=True)
            raise ProviderError(f"CNB response parsing error: {str(e)}") from e

    @staticmethod
    def _parse_rate(entry: dict) -> RawRateQuote:
        try:
            rate = Decimal(str(entry["rate"]))
        except InvalidOperation as e:
            raise ValueError(f"Invalid rate {entry['rate']!r} for {entry.get('currencyCode')}") from e
        return RawRateQuote(
            currency_code=entry["currencyCode"],
            rate=rate,
            amount=entry.get("amount", 1),
        )


class CzechNationalBankRateSourceFactory(RateSourceFactory):
    def __init__(self, client: httpx.AsyncClient, settings: Settings | None = None):
        self._client = client
        self.settings = settings or get_settings()

    def create(self, target_currency_code: str) -> CzechNationalBankRateSource:
        if target_currency_code != CNB_TARGET_CURRENCY:
            raise InvalidCurrencyError(
                f"Czech National Bank publishes rates into {CNB_TARGET_CURRENCY} only, "
                f"not {target_currency_code}"
            )
        return CzechNationalBankRateSource(
            client=self._client,
            base_url=self.settings.CNB_API_BASE_URL,
            target_currency=target_currency_code,
        )
