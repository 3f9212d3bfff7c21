from .responses import BorderExchangeResponse, BorderRate, DiagnosticResponse, RateHistoryResponse

__all__ = [
	'BorderExchangeResponse',
	'BorderRate',
	'DiagnosticResponse',
	'RateHistoryResponse',
]
