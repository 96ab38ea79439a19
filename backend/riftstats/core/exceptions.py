"""
Service layer custom exceptions.

Wrap failures from the Riot API and the database so callers can tell
which collaborator broke without depending on library exception types.
"""

from typing import Any, Dict, Optional


class ServiceException(Exception):
    """Base exception for all service layer errors."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.service and self.operation:
            return f"[{self.service}.{self.operation}] {self.message}"
        return self.message


class DatabaseError(ServiceException):
    """Exception raised when the match store cannot complete a query."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=f"Database error: {message}",
            service=service,
            operation=operation,
            context=context,
            original_error=original_error,
        )


class IngestionError(ServiceException):
    """Exception raised when match ingestion aborts.

    Matches inserted before the failure stay stored; ``processed_count``
    records how many that was.
    """

    def __init__(
        self,
        message: str,
        puuid: str,
        processed_count: int = 0,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            service="MatchIngestionService",
            operation="ingest_recent_matches",
            context={"puuid": puuid, "processed_count": processed_count},
            original_error=original_error,
        )
        self.puuid = puuid
        self.processed_count = processed_count
