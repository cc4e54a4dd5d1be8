import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.schemas import ErrorBody, ErrorResponse
from domain.exceptions.currency import ConfigurationError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)


def error_response(
	status_code: int, message: str, details: str | None = None, headers: dict | None = None
) -> JSONResponse:
	body = ErrorResponse(error=ErrorBody(message=message, details=details))
	return JSONResponse(
		status_code=status_code, content=body.model_dump(exclude_none=True), headers=headers
	)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ValidationError)
	async def validation_error_handler(request: Request, exc: ValidationError):
		return error_response(status.HTTP_400_BAD_REQUEST, str(exc))

	@app.exception_handler(ConfigurationError)
	async def configuration_error_handler(request: Request, exc: ConfigurationError):
		logger.error(f'Configuration error: {exc}')
		return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

	@app.exception_handler(UpstreamError)
	async def upstream_error_handler(request: Request, exc: UpstreamError):
		logger.error(f'Upstream error: {exc}')
		return error_response(
			status.HTTP_502_BAD_GATEWAY,
			'Failed to fetch or compute exchange rates.',
			details=str(exc),
		)

	@app.exception_handler(StarletteHTTPException)
	async def http_error_handler(request: Request, exc: StarletteHTTPException):
		if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
			message = 'Method not allowed. Use GET.'
		else:
			message = str(exc.detail)
		return error_response(exc.status_code, message, headers=getattr(exc, 'headers', None))

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error')
