import logging
from datetime import date

from domain.exceptions.exchange import InvalidRequestError, NotFoundError
from domain.models.exchange import RateHistory
from infrastructure.providers.exchangerates import ExchangeRatesClient
from infrastructure.providers.restcountries import RestCountriesClient

logger = logging.getLogger(__name__)

HISTORY_PATH_HINT = 'Expecting format .../exchange/v1/exchangehistory/{:country_name}/{:begin_date-end_date}'


def _parse_date(year: str, month: str, day: str) -> date:
	try:
		return date(int(year), int(month), int(day))
	except ValueError as e:
		raise InvalidRequestError(f'Date format wrong. {HISTORY_PATH_HINT}') from e


def parse_history_path(remainder: str) -> tuple[str, date, date]:
	segments = remainder.split('/')
	if len(segments) != 2:
		raise InvalidRequestError(HISTORY_PATH_HINT)

	name, date_range = segments
	if not name.strip():
		raise InvalidRequestError(f'Missing country name. {HISTORY_PATH_HINT}')

	parts = date_range.split('-')
	if len(parts) != 6:
		raise InvalidRequestError(f'Date format wrong. {HISTORY_PATH_HINT}')

	start_date = _parse_date(*parts[:3])
	end_date = _parse_date(*parts[3:])
	if start_date >= end_date:
		raise InvalidRequestError(f'Begin date must be before end date. {HISTORY_PATH_HINT}')

	return name, start_date, end_date


class RateHistoryService:
	def __init__(self, countries_client: RestCountriesClient, rates_client: ExchangeRatesClient):
		self.countries_client = countries_client
		self.rates_client = rates_client

	async def get_history(self, country_name: str, start_date: date, end_date: date) -> RateHistory:
		country = await self.countries_client.resolve_by_name(country_name)
		if not country.currency_code:
			raise NotFoundError(f'No currency is recorded for {country_name}')

		history = await self.rates_client.fetch_history(country.currency_code, start_date, end_date)
		logger.info(
			f'Fetched {len(history.rates)} days of {country.currency_code} history for {country_name}'
		)
		return history
