from .border_service import BorderExchangeService, effective_count, parse_country_name, parse_limit
from .diagnostics_service import DiagnosticsService
from .history_service import RateHistoryService, parse_history_path

__all__ = [
	'BorderExchangeService',
	'DiagnosticsService',
	'RateHistoryService',
	'effective_count',
	'parse_country_name',
	'parse_history_path',
	'parse_limit',
]
