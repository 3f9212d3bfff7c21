import asyncio
import logging
import re
from collections.abc import Sequence

from domain.exceptions.exchange import InvalidRequestError, NotFoundError
from domain.models.exchange import AggregatedEntry, AggregationResult, BorderCountryRecord
from infrastructure.providers.exchangerates import ExchangeRatesClient
from infrastructure.providers.restcountries import RestCountriesClient

logger = logging.getLogger(__name__)

LIMIT_PATTERN = re.compile(r'[+-]?[0-9]+')
BORDER_PATH_HINT = 'Expecting format .../exchange/v1/exchangeborder/countryname'


def parse_country_name(remainder: str) -> str:
	"""Extract the country name from the path left after the endpoint prefix."""
	segments = remainder.split('/')
	if len(segments) != 1:
		raise InvalidRequestError(BORDER_PATH_HINT)

	name = segments[0]
	if not name.strip():
		raise InvalidRequestError(f'Missing country name. {BORDER_PATH_HINT}')
	return name


def parse_limit(raw: str | None) -> int | None:
	"""Return the requested limit, or None (unbounded) when absent or non-numeric.

	Negative limits select no bordering countries.
	"""
	if raw is None or not LIMIT_PATTERN.fullmatch(raw):
		return None
	if raw.startswith('-'):
		return 0
	try:
		return int(raw)
	except ValueError:
		# too many digits to convert; such a limit always exceeds the border count
		return None


def effective_count(limit: int | None, border_count: int) -> int:
	if limit is None:
		return border_count
	return min(limit, border_count)


class BorderExchangeService:
	def __init__(
		self,
		countries_client: RestCountriesClient,
		rates_client: ExchangeRatesClient,
		concurrency: int = 1,
	):
		self.countries_client = countries_client
		self.rates_client = rates_client
		self.concurrency = concurrency

	async def aggregate(self, country_name: str, limit: int | None = None) -> AggregationResult:
		country = await self.countries_client.resolve_by_name(country_name)
		if not country.currency_code:
			raise NotFoundError(f'No currency is recorded for {country_name}')

		rate_table = await self.rates_client.fetch_rates(country.currency_code)

		count = effective_count(limit, len(country.border_codes))
		borders = await self._resolve_borders(country.border_codes[:count])

		entries = tuple(
			AggregatedEntry(
				country_name=border.name,
				currency_code=border.currency_code,
				rate=rate_table.rate_for(border.currency_code),
			)
			for border in borders
			if border.currency_code
		)

		logger.info(
			f'Aggregated {len(entries)} of {count} bordering countries for {country_name} '
			f'(base {country.currency_code})'
		)
		return AggregationResult(base_currency_code=country.currency_code, entries=entries)

	async def _resolve_borders(self, codes: Sequence[str]) -> list[BorderCountryRecord]:
		if self.concurrency <= 1:
			return [await self.countries_client.resolve_by_code(code) for code in codes]

		semaphore = asyncio.Semaphore(self.concurrency)

		async def resolve(code: str) -> BorderCountryRecord:
			async with semaphore:
				return await self.countries_client.resolve_by_code(code)

		# the task group cancels and awaits the remaining lookups on the first failure
		try:
			async with asyncio.TaskGroup() as group:
				tasks = [group.create_task(resolve(code)) for code in codes]
		except ExceptionGroup as eg:
			raise eg.exceptions[0] from eg

		return [task.result() for task in tasks]
