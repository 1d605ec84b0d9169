from fastapi import status
from sqlalchemy.exc import SQLAlchemyError


class BookingServiceError(Exception):
    """Base error rendered to clients as {"error": message}."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class VillaNotFoundError(BookingServiceError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Villa not found."):
        super().__init__(message)


class StorageError(BookingServiceError):
    """A database failure; the driver's message is passed through as is."""

    @classmethod
    def from_exception(cls, exc: SQLAlchemyError) -> "StorageError":
        orig = getattr(exc, "orig", None)
        return cls(str(orig) if orig is not None else str(exc))
