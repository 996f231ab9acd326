from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from pydantic import StringConstraints

from api.dependencies import get_rate_provider
from api.schemas import ComputedRateResponse, ExchangeRatesResponse
from application.services import RateProvider
from config.settings import get_settings
from domain.models.currency import Currency

CurrencyCode = Annotated[str, StringConstraints(min_length=3, max_length=5)]

router = APIRouter(prefix='/api', tags=['rates'])


@router.get(
	'/rates',
	response_model=ExchangeRatesResponse,
	status_code=status.HTTP_200_OK,
	summary="Get today's exchange rates into a target currency",
)
async def get_exchange_rates(
	provider: Annotated[RateProvider, Depends(get_rate_provider)],
	currencies: Annotated[
		list[CurrencyCode] | None,
		Query(description='Source currency codes; repeat the parameter for several'),
	] = None,
	target: Annotated[
		str | None,
		Query(
			min_length=3,
			max_length=5,
		),
	] = None,
) -> ExchangeRatesResponse:
	settings = get_settings()
	codes = currencies if currencies is not None else settings.default_currency_codes
	target_code = (target or settings.TARGET_CURRENCY).upper()

	requested = [Currency(code.strip().upper()) for code in codes]
	result = await provider.compute(requested, target_code)

	return ExchangeRatesResponse(
		target_currency=target_code,
		rates=[
			ComputedRateResponse(
				source_currency=rate.source_currency.code,
				target_currency=rate.target_currency.code,
				rate=rate.value,
			)
			for rate in result
		],
	)
