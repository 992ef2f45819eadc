# routers/error_handlers.py
"""
Global exception handlers.

- ApartmentServiceError -> its own status and {"message", "error", "timestamp"} body
- RequestValidationError -> 400 with field-level details
- unmatched routes -> 404 {"error": "Route not found"}
- other HTTPExceptions (401/403 from the write guard) -> same envelope as service errors
- SQLAlchemyError -> 500 DATABASE_ERROR, no driver details
- Exception -> 500 INTERNAL_ERROR
"""
import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from errors import ApartmentServiceError, InternalError

logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
     401: "UNAUTHORIZED",
     403: "FORBIDDEN",
     405: "METHOD_NOT_ALLOWED",
}


def register_error_handlers(app: FastAPI) -> None:
     """Register all global error handlers on the FastAPI app."""

     @app.exception_handler(ApartmentServiceError)
     async def service_error_handler(request: Request, exc: ApartmentServiceError):
          log = logger.error if exc.http_status >= 500 else logger.warning
          log(
               f"{exc.code}: {exc.message}",
               extra={"error_code": exc.code, "path": request.url.path},
          )
          return JSONResponse(status_code=exc.http_status, content=exc.to_response())

     @app.exception_handler(RequestValidationError)
     async def validation_error_handler(request: Request, exc: RequestValidationError):
          logger.warning(
               f"Validation error on {request.url.path}: {exc.errors()}",
               extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
          )
          return JSONResponse(
               status_code=status.HTTP_400_BAD_REQUEST,
               content=_build_validation_error_response(exc),
          )

     @app.exception_handler(StarletteHTTPException)
     async def http_error_handler(request: Request, exc: StarletteHTTPException):
          # Service-level 404s are ApartmentNotFoundError; a bare 404 here means no route matched
          if exc.status_code == status.HTTP_404_NOT_FOUND:
               return JSONResponse(status_code=404, content={"error": "Route not found"})
          code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
          logger.warning(
               f"{code}: {exc.detail}",
               extra={"error_code": code, "path": request.url.path},
          )
          return JSONResponse(
               status_code=exc.status_code,
               content={
                    "message": str(exc.detail),
                    "error": code,
                    "timestamp": datetime.now(timezone.utc).isoformat(),
               },
               headers=getattr(exc, "headers", None),
          )

     @app.exception_handler(SQLAlchemyError)
     async def database_error_handler(request: Request, exc: SQLAlchemyError):
          logger.error(
               f"Database error on {request.url.path}",
               exc_info=exc,
               extra={"error_code": "DATABASE_ERROR", "path": request.url.path},
          )
          return JSONResponse(
               status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
               content={
                    "message": "A database error occurred",
                    "error": "DATABASE_ERROR",
                    "timestamp": datetime.now(timezone.utc).isoformat(),
               },
          )

     @app.exception_handler(Exception)
     async def generic_error_handler(request: Request, exc: Exception):
          logger.error(
               f"Unhandled exception on {request.url.path}: {exc}",
               exc_info=exc,
               extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
          )
          return JSONResponse(
               status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
               content=InternalError().to_response(),
          )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
     return {
          "message": "Invalid request data",
          "error": "VALIDATION_ERROR",
          "timestamp": datetime.now(timezone.utc).isoformat(),
          "details": [
               {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
               }
               for e in exc.errors()
          ],
     }
