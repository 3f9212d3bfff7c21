import asyncio
import logging
import time
from collections.abc import Callable

from domain.exceptions.exchange import UpstreamUnavailableError
from domain.models.exchange import Diagnostic
from infrastructure.providers.base import BaseAPIClient

logger = logging.getLogger(__name__)


class DiagnosticsService:
	"""Reports upstream reachability and the uptime since ``started_at``.

	``started_at`` is a reading of ``clock`` taken once when the process starts.
	"""

	def __init__(
		self,
		countries_client: BaseAPIClient,
		rates_client: BaseAPIClient,
		started_at: float,
		version: str,
		clock: Callable[[], float] = time.monotonic,
	):
		self.countries_client = countries_client
		self.rates_client = rates_client
		self.started_at = started_at
		self.version = version
		self._clock = clock

	async def _probe(self, client: BaseAPIClient) -> str:
		try:
			return str(await client.probe())
		except UpstreamUnavailableError as e:
			logger.error(f'Diagnostics probe of {client.name} failed: {e}')
			return 'unreachable'

	async def collect(self) -> Diagnostic:
		rates_status, countries_status = await asyncio.gather(
			self._probe(self.rates_client), self._probe(self.countries_client)
		)
		uptime = int(self._clock() - self.started_at)

		return Diagnostic(
			exchangeratesapi=rates_status,
			restcountries=countries_status,
			version=self.version,
			uptime=f'{uptime}s',
		)
