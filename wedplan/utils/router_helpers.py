from fastapi import HTTPException, status
from typing import Callable, Any
from functools import wraps
import logging

from ..services.exceptions import (
    ServiceError,
    NotFoundError,
    PermissionDeniedError,
    BusinessRuleViolationError,
    ConflictError,
    OrchestrationError,
)

logger = logging.getLogger(__name__)

# Checked in order, the first matching class wins
ERROR_STATUS = (
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN, "Permission denied"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "Resource not found"),
    (ConflictError, status.HTTP_409_CONFLICT, "Conflict"),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST, "Business rule violation"),
    (OrchestrationError, status.HTTP_500_INTERNAL_SERVER_ERROR, "Orchestration failure"),
    (ServiceError, status.HTTP_400_BAD_REQUEST, "Service error"),
    (ValueError, status.HTTP_400_BAD_REQUEST, "Validation error"),
)


def to_http_exception(error: Exception, where: str) -> HTTPException:
    """Map a service exception to the HTTP error the client sees"""
    for error_class, status_code, label in ERROR_STATUS:
        if isinstance(error, error_class):
            if status_code >= 500:
                logger.error(f"{label} in {where}: {str(error)}")
            else:
                logger.warning(f"{label}: {str(error)}")
            return HTTPException(status_code=status_code, detail=str(error))

    logger.error(f"Unexpected error in {where}: {str(error)}", exc_info=error)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred",
    )


def handle_service_errors(func: Callable) -> Callable:
    """Decorator to standardize service error handling in routers"""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as e:
            raise to_http_exception(e, func.__name__)

    return wrapper


class RouterResponse:
    """Envelope shared by every route: success, message and optional data"""

    @staticmethod
    def _envelope(message: str, data: Any = None, include_empty: bool = False) -> dict:
        response = {"success": True, "message": message}
        if data is not None or include_empty:
            response["data"] = data
        return response

    @staticmethod
    def success(data: Any = None, message: str = "Success") -> dict:
        return RouterResponse._envelope(message, data)

    @staticmethod
    def created(data: Any, message: str = "Resource created successfully") -> dict:
        return RouterResponse._envelope(message, data, include_empty=True)

    @staticmethod
    def updated(
        data: Any = None, message: str = "Resource updated successfully"
    ) -> dict:
        return RouterResponse._envelope(message, data)

    @staticmethod
    def deleted(message: str = "Resource deleted successfully", data: Any = None) -> dict:
        return RouterResponse._envelope(message, data)

    @staticmethod
    def empty(message: str) -> dict:
        """Successful call with nothing to show yet, data is an explicit null"""
        return RouterResponse._envelope(message, None, include_empty=True)
