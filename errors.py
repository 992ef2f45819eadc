# errors.py
"""
Error hierarchy for the apartments API.

Services raise these; routers/error_handlers.py turns them into JSON
responses of the form {"message", "error", "timestamp"}.
"""
from datetime import datetime, timezone


class ApartmentServiceError(Exception):
     """Base exception for all apartment service errors."""

     def __init__(self, message: str, code: str, http_status: int = 500):
          super().__init__(message)
          self.message = message
          self.code = code
          self.http_status = http_status
          self.timestamp = datetime.now(timezone.utc)

     def to_response(self) -> dict:
          return {
               "message": self.message,
               "error": self.code,
               "timestamp": self.timestamp.isoformat(),
          }


class InvalidInputError(ApartmentServiceError):
     """Request data is malformed or out of range."""
     def __init__(self, message: str, field: str | None = None):
          super().__init__(message, "VALIDATION_ERROR", 400)
          self.field = field


class ApartmentNotFoundError(ApartmentServiceError):
     """Apartment is missing, unavailable or soft-deleted."""
     def __init__(self, apartment_id: int):
          super().__init__(f"Apartment with ID {apartment_id} not found", "NOT_FOUND", 404)
          self.apartment_id = apartment_id


class DuplicateUnitNumberError(ApartmentServiceError):
     """Another active apartment already uses this unit number."""
     def __init__(self, unit_number: str):
          super().__init__(
               f"Apartment with unit number '{unit_number}' already exists",
               "DUPLICATE_UNIT_NUMBER", 409,
          )
          self.unit_number = unit_number


class InternalError(ApartmentServiceError):
     """Unexpected failure; the message is safe to show to clients."""
     def __init__(self, message: str = "An unexpected error occurred"):
          super().__init__(message, "INTERNAL_ERROR", 500)
