from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from api.dependencies import get_diagnostics_service
from api.routes.exchange import redirect_with_slash
from api.schemas import DiagnosticResponse
from application.services import DiagnosticsService

router = APIRouter(prefix='/exchange/v1', tags=['diagnostics'])


@router.get(
	'/diag/',
	response_model=DiagnosticResponse,
	status_code=status.HTTP_200_OK,
	summary='Upstream reachability and uptime',
)
async def diag(
	service: Annotated[DiagnosticsService, Depends(get_diagnostics_service)],
) -> DiagnosticResponse:
	diagnostic = await service.collect()
	return DiagnosticResponse(
		exchangeratesapi=diagnostic.exchangeratesapi,
		restcountries=diagnostic.restcountries,
		version=diagnostic.version,
		uptime=diagnostic.uptime,
	)


@router.get('/diag', include_in_schema=False)
async def diag_redirect(request: Request) -> RedirectResponse:
	return redirect_with_slash(request)
