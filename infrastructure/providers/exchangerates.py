import logging
from datetime import date

import httpx

from domain.exceptions.exchange import InvalidRequestError, MalformedResponseError
from domain.models.exchange import RateHistory, RateTable
from infrastructure.providers.base import BaseAPIClient

logger = logging.getLogger(__name__)


def _parse_rates(rates: object) -> dict[str, float]:
    if not isinstance(rates, dict):
        raise MalformedResponseError('Exchange rates payload has no rates object')
    try:
        return {code: float(value) for code, value in rates.items()}
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(f'Non-numeric rate in exchange rates payload: {e}') from e


class ExchangeRatesClient(BaseAPIClient):
    BASE_URL = 'https://api.exchangeratesapi.io'
    HEALTH_PATH = 'latest'

    def __init__(
        self,
        base_url: str = BASE_URL,
        api_key: str = '',
        client: httpx.AsyncClient | None = None,
        timeout: int = 10,
    ):
        super().__init__(base_url, client=client, timeout=timeout)
        self.api_key = api_key

    @property
    def name(self) -> str:
        return 'exchangeratesapi'

    def _with_key(self, params: dict) -> dict:
        if self.api_key:
            params['access_key'] = self.api_key
        return params

    async def fetch_rates(self, base_currency_code: str) -> RateTable:
        if not base_currency_code:
            raise InvalidRequestError('A base currency code is required to fetch rates')

        data = await self._request('latest', self._with_key({'base': base_currency_code}))
        if not isinstance(data, dict):
            raise MalformedResponseError('Exchange rates payload is not an object')

        upstream_base = data.get('base')
        if upstream_base and upstream_base != base_currency_code:
            logger.warning(
                f'{self.name} answered with base {upstream_base} for requested base {base_currency_code}'
            )

        return RateTable(
            base_currency_code=base_currency_code,
            as_of_date=str(data.get('date', '')),
            rates=_parse_rates(data.get('rates')),
        )

    async def fetch_history(self, symbol: str, start_date: date, end_date: date) -> RateHistory:
        data = await self._request(
            'history',
            self._with_key(
                {
                    'start_at': start_date.isoformat(),
                    'end_at': end_date.isoformat(),
                    'symbols': symbol,
                }
            ),
        )
        if not isinstance(data, dict) or not isinstance(data.get('rates'), dict):
            raise MalformedResponseError('Exchange rate history payload has no rates object')

        return RateHistory(
            base_currency_code=str(data.get('base', '')),
            start_date=str(data.get('start_at', start_date.isoformat())),
            end_date=str(data.get('end_at', end_date.isoformat())),
            rates={day: _parse_rates(day_rates) for day, day_rates in data['rates'].items()},
        )
