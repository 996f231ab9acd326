from .responses import ComputedRateResponse, ExchangeRatesResponse

__all__ = [
	'ComputedRateResponse',
	'ExchangeRatesResponse',
]
