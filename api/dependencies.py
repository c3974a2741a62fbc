import logging
from typing import Annotated

from fastapi import Depends

from application.services import ConversionService, CurrencyService, RateService
from config.settings import get_settings
from infrastructure.providers import BankOfIsraelProvider, ExchangeRateProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	provider: ExchangeRateProvider | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.provider = BankOfIsraelProvider(
		base_url=settings.BOI_BASE_URL,
		timeout=settings.HTTP_TIMEOUT,
		local_currency=settings.LOCAL_CURRENCY,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
		deps.provider = None

	logger.info('Cleanup complete')


def get_provider() -> ExchangeRateProvider:
	if deps.provider is None:
		raise RuntimeError('Provider not initialized')
	return deps.provider


def get_rate_service(
	provider: Annotated[ExchangeRateProvider, Depends(get_provider)],
) -> RateService:
	return RateService(provider=provider)


def get_currency_service(
	provider: Annotated[ExchangeRateProvider, Depends(get_provider)],
) -> CurrencyService:
	return CurrencyService(provider=provider)


def get_conversion_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> ConversionService:
	return ConversionService(rate_service=rate_service, currency_service=currency_service)
