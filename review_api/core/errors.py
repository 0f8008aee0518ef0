import logging

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from review_api.core.logging import log_event

class ApiError(HTTPException):
	status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
	default_message = "Server error"

	def __init__(self, message: str | None = None, headers: dict | None = None):
		super().__init__(status_code=self.status_code, detail=message or self.default_message, headers=headers)

class ValidationError(ApiError):
	status_code = status.HTTP_400_BAD_REQUEST
	default_message = "Validation error"

class Unauthenticated(ApiError):
	status_code = status.HTTP_401_UNAUTHORIZED
	default_message = "Not authenticated"

	def __init__(self, message: str | None = None):
		super().__init__(message, headers={"WWW-Authenticate": "Bearer"})

class Forbidden(ApiError):
	status_code = status.HTTP_403_FORBIDDEN
	default_message = "Forbidden"

class NotFound(ApiError):
	status_code = status.HTTP_404_NOT_FOUND
	default_message = "Not found"

class Conflict(ApiError):
	status_code = status.HTTP_409_CONFLICT
	default_message = "Conflict"

class StoreError(ApiError):
	pass

def error_response(request: Request, status_code: int, message: str, details=None, headers=None):
	# Ensure details is serializable
	if isinstance(details, Exception):
		details = str(details)
	return JSONResponse(
		status_code=status_code,
		content={
			"error": {
				"message": message,
				"details": jsonable_encoder(details),
				"request_id": getattr(request.state, "request_id", None),
			}
		},
		headers=headers,
	)

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
	return error_response(request, exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

async def validation_exception_handler(request: Request, exc: RequestValidationError):
	return error_response(
		request,
		status.HTTP_400_BAD_REQUEST,
		"Validation error",
		details=exc.errors(),
	)

async def integrity_error_handler(request: Request, exc: IntegrityError):
	log_event(
		"store_error",
		level=logging.WARNING,
		kind="integrity",
		error=str(exc.orig),
		path=request.url.path,
		request_id=getattr(request.state, "request_id", None),
	)
	return error_response(request, status.HTTP_409_CONFLICT, "Conflict")

async def store_error_handler(request: Request, exc: SQLAlchemyError):
	log_event(
		"store_error",
		level=logging.ERROR,
		kind=type(exc).__name__,
		error=str(exc),
		path=request.url.path,
		request_id=getattr(request.state, "request_id", None),
	)
	return error_response(request, StoreError.status_code, StoreError.default_message)
