from api.schemas import BorderExchangeResponse, BorderRate
from domain.models.exchange import AggregationResult


def format_result(result: AggregationResult) -> bytes:
	"""Serialize an aggregation result; rates are rendered with six decimals."""
	payload = BorderExchangeResponse(
		rates={
			entry.country_name: BorderRate(currency=entry.currency_code, rate=f'{entry.rate:f}')
			for entry in result.entries
		},
		base=result.base_currency_code,
	)
	return payload.model_dump_json().encode('utf-8')
