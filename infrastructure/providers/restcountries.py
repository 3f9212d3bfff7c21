from urllib.parse import quote

import httpx

from domain.exceptions.exchange import MalformedResponseError
from domain.models.exchange import BorderCountryRecord, CountryRecord
from infrastructure.providers.base import BaseAPIClient


def _first_currency_code(payload: dict) -> str:
    currencies = payload.get('currencies') or []
    if not isinstance(currencies, list):
        raise MalformedResponseError('REST Countries currencies field is not a list')
    if not currencies:
        return ''

    first = currencies[0]
    if not isinstance(first, dict):
        raise MalformedResponseError('REST Countries currency entry is not an object')
    return first.get('code') or ''


class RestCountriesClient(BaseAPIClient):
    BASE_URL = 'https://restcountries.com/v2'

    def __init__(
        self,
        base_url: str = BASE_URL,
        client: httpx.AsyncClient | None = None,
        timeout: int = 10,
    ):
        super().__init__(base_url, client=client, timeout=timeout)

    @property
    def name(self) -> str:
        return 'restcountries'

    async def resolve_by_name(self, name: str) -> CountryRecord:
        data = await self._request(
            f'name/{quote(name, safe="")}', {'fields': 'borders,currencies'}
        )

        # Name search is partial; the first match wins
        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            raise MalformedResponseError(f'Unexpected REST Countries payload for {name!r}')
        country = data[0]

        borders = country.get('borders') or []
        if not isinstance(borders, list) or not all(isinstance(b, str) for b in borders):
            raise MalformedResponseError('REST Countries borders field is not a list of codes')

        return CountryRecord(
            currency_code=_first_currency_code(country),
            border_codes=tuple(borders),
        )

    async def resolve_by_code(self, code: str) -> BorderCountryRecord:
        data = await self._request(
            f'alpha/{quote(code, safe="")}', {'fields': 'name,currencies'}
        )

        if not isinstance(data, dict) or not isinstance(data.get('name'), str):
            raise MalformedResponseError(f'Unexpected REST Countries payload for {code!r}')

        return BorderCountryRecord(name=data['name'], currency_code=_first_currency_code(data))
