import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from domain.exceptions.currency import InvalidCurrencyError, ProviderError

logger = logging.getLogger(__name__)

RATE_SOURCE_UNAVAILABLE = 'Czech National Bank exchange rates are currently unavailable'


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidCurrencyError)
	async def invalid_currency_handler(request: Request, exc: InvalidCurrencyError):
		logger.info(f'Rejected {request.url.path}: {exc}')
		return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': str(exc)})

	@app.exception_handler(ProviderError)
	async def rate_source_error_handler(request: Request, exc: ProviderError):
		# exc_info keeps the chained httpx error in the log record
		logger.error(
			f'Rate source failed for {request.url.path}: {exc}',
			exc_info=(type(exc), exc, exc.__traceback__),
		)
		return JSONResponse(
			status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
			content={'detail': RATE_SOURCE_UNAVAILABLE},
		)
