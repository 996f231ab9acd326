import logging
from typing import Annotated

import httpx
from fastapi import Depends

from application.services import RateProvider
from config.settings import get_settings
from infrastructure.providers import CzechNationalBankRateSourceFactory, RateSourceFactory

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	http_client: httpx.AsyncClient | None = None
	source_factory: RateSourceFactory | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.http_client = httpx.AsyncClient(timeout=settings.CNB_TIMEOUT)
	deps.source_factory = CzechNationalBankRateSourceFactory(deps.http_client, settings)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.http_client:
		await deps.http_client.aclose()
	deps.http_client = None
	deps.source_factory = None

	logger.info('Cleanup complete')


def get_source_factory() -> RateSourceFactory:
	if deps.source_factory is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')
	return deps.source_factory


def get_rate_provider(
	source_factory: Annotated[RateSourceFactory, Depends(get_source_factory)],
) -> RateProvider:
	return RateProvider(source_factory)
