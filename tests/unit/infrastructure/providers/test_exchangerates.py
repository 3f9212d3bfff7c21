# nosec B101


import pytest
from datetime import date
from unittest.mock import Mock, AsyncMock
import httpx

from infrastructure.providers.exchangerates import ExchangeRatesClient
from domain.exceptions.exchange import (
    InvalidRequestError,
    MalformedResponseError,
    NotFoundError,
    UpstreamUnavailableError,
)


def make_client(payload):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response
    return mock_client


@pytest.mark.asyncio
async def test_fetch_rates_success_returns_rate_table():
    mock_client = make_client({
        'base': 'NOK',
        'date': '2021-03-01',
        'rates': {'SEK': 0.95, 'EUR': 0.097, 'NOK': 1.0},
    })

    client = ExchangeRatesClient('https://rates.test', client=mock_client)
    table = await client.fetch_rates('NOK')

    assert table.base_currency_code == 'NOK'
    assert table.as_of_date == '2021-03-01'
    assert table.rates == {'SEK': 0.95, 'EUR': 0.097, 'NOK': 1.0}
    call_args = mock_client.get.call_args
    assert call_args[0][0] == 'https://rates.test/latest'
    assert call_args[1]['params'] == {'base': 'NOK'}


@pytest.mark.asyncio
async def test_fetch_rates_sends_access_key_when_configured():
    mock_client = make_client({'base': 'NOK', 'rates': {}})

    client = ExchangeRatesClient('https://rates.test', api_key='test_key', client=mock_client)
    await client.fetch_rates('NOK')

    assert mock_client.get.call_args[1]['params']['access_key'] == 'test_key'


@pytest.mark.asyncio
async def test_rate_for_unknown_currency_is_zero():
    client = ExchangeRatesClient(client=make_client({'base': 'NOK', 'rates': {'SEK': 0.95}}))

    table = await client.fetch_rates('NOK')

    assert table.rate_for('SEK') == 0.95
    assert table.rate_for('EUR') == 0.0


@pytest.mark.asyncio
async def test_fetch_rates_keeps_requested_base_when_upstream_differs():
    client = ExchangeRatesClient(client=make_client({'base': 'EUR', 'rates': {'SEK': 10.1}}))

    table = await client.fetch_rates('NOK')

    assert table.base_currency_code == 'NOK'


@pytest.mark.asyncio
async def test_fetch_rates_empty_base_is_not_requested():
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    client = ExchangeRatesClient(client=mock_client)
    with pytest.raises(InvalidRequestError):
        await client.fetch_rates('')

    mock_client.get.assert_not_called()


@pytest.mark.asyncio
async def test_fetch_rates_unknown_base_raises_not_found():
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    error_response = Mock()
    error_response.status_code = 400
    error_response.text = "Base 'XXX' is not supported."

    mock_client.get.side_effect = httpx.HTTPStatusError(
        'Bad request',
        request=Mock(),
        response=error_response
    )

    client = ExchangeRatesClient(client=mock_client)
    with pytest.raises(NotFoundError) as exc_info:
        await client.fetch_rates('XXX')

    assert '400' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_rates_network_timeout():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.TimeoutException('Request timed out')

    client = ExchangeRatesClient(client=mock_client)
    with pytest.raises(UpstreamUnavailableError):
        await client.fetch_rates('NOK')


@pytest.mark.asyncio
async def test_fetch_rates_without_rates_object_is_malformed():
    client = ExchangeRatesClient(client=make_client({'base': 'NOK', 'error': 'oops'}))

    with pytest.raises(MalformedResponseError):
        await client.fetch_rates('NOK')


@pytest.mark.asyncio
async def test_fetch_rates_non_numeric_rate_is_malformed():
    client = ExchangeRatesClient(client=make_client({'base': 'NOK', 'rates': {'SEK': 'abc'}}))

    with pytest.raises(MalformedResponseError):
        await client.fetch_rates('NOK')


@pytest.mark.asyncio
async def test_fetch_history_success():
    mock_client = make_client({
        'rates': {
            '2020-12-01': {'NOK': 10.7},
            '2020-12-02': {'NOK': 10.75},
        },
        'start_at': '2020-12-01',
        'base': 'EUR',
        'end_at': '2020-12-02',
    })

    client = ExchangeRatesClient('https://rates.test', client=mock_client)
    history = await client.fetch_history('NOK', date(2020, 12, 1), date(2020, 12, 2))

    assert history.base_currency_code == 'EUR'
    assert history.start_date == '2020-12-01'
    assert history.end_date == '2020-12-02'
    assert history.rates['2020-12-02'] == {'NOK': 10.75}
    call_args = mock_client.get.call_args
    assert call_args[0][0] == 'https://rates.test/history'
    assert call_args[1]['params'] == {
        'start_at': '2020-12-01',
        'end_at': '2020-12-02',
        'symbols': 'NOK',
    }


@pytest.mark.asyncio
async def test_fetch_history_without_rates_is_malformed():
    client = ExchangeRatesClient(client=make_client({'base': 'EUR'}))

    with pytest.raises(MalformedResponseError):
        await client.fetch_history('NOK', date(2020, 12, 1), date(2020, 12, 2))


@pytest.mark.asyncio
async def test_probe_uses_latest_endpoint():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.head.return_value = Mock(status_code=401)

    client = ExchangeRatesClient('https://rates.test/', client=mock_client)

    assert await client.probe() == 401
    mock_client.head.assert_called_once_with('https://rates.test/latest')
