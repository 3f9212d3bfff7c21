import logging
from typing import Annotated

from fastapi import Depends

from application.services import BorderExchangeService, DiagnosticsService, RateHistoryService
from config.settings import get_settings
from infrastructure.providers import ExchangeRatesClient, RestCountriesClient

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	countries_client: RestCountriesClient | None = None
	rates_client: ExchangeRatesClient | None = None
	started_at: float | None = None


deps = AppDependencies()


def init_dependencies(started_at: float) -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.started_at = started_at
	deps.countries_client = RestCountriesClient(
		settings.COUNTRIES_API_URL, timeout=settings.HTTP_TIMEOUT
	)
	deps.rates_client = ExchangeRatesClient(
		settings.RATES_API_URL, api_key=settings.RATES_API_KEY, timeout=settings.HTTP_TIMEOUT
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.countries_client:
		await deps.countries_client.close()
	if deps.rates_client:
		await deps.rates_client.close()

	logger.info('Cleanup complete')


def get_countries_client() -> RestCountriesClient:
	if deps.countries_client is None:
		raise RuntimeError('Countries client not initialized')
	return deps.countries_client


def get_rates_client() -> ExchangeRatesClient:
	if deps.rates_client is None:
		raise RuntimeError('Rates client not initialized')
	return deps.rates_client


def get_border_service(
	countries_client: Annotated[RestCountriesClient, Depends(get_countries_client)],
	rates_client: Annotated[ExchangeRatesClient, Depends(get_rates_client)],
) -> BorderExchangeService:
	return BorderExchangeService(
		countries_client=countries_client,
		rates_client=rates_client,
		concurrency=get_settings().BORDER_LOOKUP_CONCURRENCY,
	)


def get_history_service(
	countries_client: Annotated[RestCountriesClient, Depends(get_countries_client)],
	rates_client: Annotated[ExchangeRatesClient, Depends(get_rates_client)],
) -> RateHistoryService:
	return RateHistoryService(countries_client=countries_client, rates_client=rates_client)


def get_diagnostics_service(
	countries_client: Annotated[RestCountriesClient, Depends(get_countries_client)],
	rates_client: Annotated[ExchangeRatesClient, Depends(get_rates_client)],
) -> DiagnosticsService:
	if deps.started_at is None:
		raise RuntimeError('Process start time not recorded')
	return DiagnosticsService(
		countries_client=countries_client,
		rates_client=rates_client,
		started_at=deps.started_at,
		version=get_settings().API_VERSION,
	)
