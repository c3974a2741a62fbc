import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from domain.exceptions.currency import ProviderError, UnknownCurrencyError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(UnknownCurrencyError)
	async def unknown_currency_handler(request: Request, exc: UnknownCurrencyError):
		return JSONResponse(
			status_code=status.HTTP_404_NOT_FOUND,
			content={'detail': f'No exchange information found for {exc.code}.'},
		)

	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error: {exc}')
		return JSONResponse(
			status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
			content={'detail': 'Exchange rate service unavailable'},
		)

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return JSONResponse(
			status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
			content={'detail': 'Internal server error'},
		)
