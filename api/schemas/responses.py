from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ComputedRateResponse(BaseModel):
	source_currency: str = Field(..., description='Source currency code')
	target_currency: str = Field(..., description='Target currency code')
	rate: Decimal = Field(..., description='Target currency units per one unit of source currency')


class ExchangeRatesResponse(BaseModel):
	target_currency: str = Field(..., description='Currency all rates convert into')
	rates: list[ComputedRateResponse] = Field(
		description='Rates for the requested currencies the source publishes'
	)

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'target_currency': 'CZK',
				'rates': [
					{'source_currency': 'USD', 'target_currency': 'CZK', 'rate': '22.817'},
					{'source_currency': 'RUB', 'target_currency': 'CZK', 'rate': '0.25019'},
				],
			}
		}
	)
