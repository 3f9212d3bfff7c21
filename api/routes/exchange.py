from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import RedirectResponse

from api.dependencies import get_border_service, get_history_service
from api.formatters import format_result
from api.schemas import BorderExchangeResponse, RateHistoryResponse
from application.services import (
	BorderExchangeService,
	RateHistoryService,
	parse_country_name,
	parse_history_path,
	parse_limit,
)

router = APIRouter(prefix='/exchange/v1', tags=['exchange'])


def redirect_with_slash(request: Request) -> RedirectResponse:
	return RedirectResponse(
		url=str(request.url.replace(path=request.url.path + '/')),
		status_code=status.HTTP_303_SEE_OTHER,
	)


@router.get(
	'/exchangeborder/{remainder:path}',
	responses={status.HTTP_200_OK: {'model': BorderExchangeResponse}},
	summary='Exchange rates of bordering countries',
)
async def exchange_border(
	remainder: str,
	service: Annotated[BorderExchangeService, Depends(get_border_service)],
	limit: Annotated[str | None, Query(description='Maximum number of bordering countries')] = None,
) -> Response:
	country_name = parse_country_name(remainder)
	result = await service.aggregate(country_name, parse_limit(limit))
	return Response(content=format_result(result), media_type='application/json')


@router.get(
	'/exchangehistory/{remainder:path}',
	response_model=RateHistoryResponse,
	status_code=status.HTTP_200_OK,
	summary='Exchange rate history of a country currency',
)
async def exchange_history(
	remainder: str,
	service: Annotated[RateHistoryService, Depends(get_history_service)],
) -> RateHistoryResponse:
	country_name, start_date, end_date = parse_history_path(remainder)
	history = await service.get_history(country_name, start_date, end_date)
	return RateHistoryResponse(
		rates=history.rates,
		start_at=history.start_date,
		base=history.base_currency_code,
		end_at=history.end_date,
	)


@router.get('/exchangeborder', include_in_schema=False)
async def exchange_border_redirect(request: Request) -> RedirectResponse:
	return redirect_with_slash(request)


@router.get('/exchangehistory', include_in_schema=False)
async def exchange_history_redirect(request: Request) -> RedirectResponse:
	return redirect_with_slash(request)
