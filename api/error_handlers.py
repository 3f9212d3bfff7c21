import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from domain.exceptions.exchange import (
	InvalidRequestError,
	MalformedResponseError,
	NotFoundError,
	UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidRequestError)
	async def invalid_request_handler(request: Request, exc: InvalidRequestError):
		return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': str(exc)})

	@app.exception_handler(NotFoundError)
	async def not_found_handler(request: Request, exc: NotFoundError):
		logger.info(f'Lookup for {request.url.path} not resolved: {exc}')
		return JSONResponse(
			status_code=status.HTTP_404_NOT_FOUND,
			content={'detail': 'Country or currency not recognized by the upstream service'},
		)

	@app.exception_handler(UpstreamUnavailableError)
	async def upstream_unavailable_handler(request: Request, exc: UpstreamUnavailableError):
		logger.error(f'Upstream unavailable: {exc}')
		return JSONResponse(
			status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
			content={'detail': 'Error in request to upstream service'},
		)

	@app.exception_handler(MalformedResponseError)
	async def malformed_response_handler(request: Request, exc: MalformedResponseError):
		logger.error(f'Malformed upstream response: {exc}')
		return JSONResponse(
			status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
			content={'detail': 'Error in parsing data'},
		)
