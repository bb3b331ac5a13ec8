from typing import Any
from sqlalchemy.exc import SQLAlchemyError
from framework.logging.logger import get_logger
from framework.config import settings

logger = get_logger("exception_handler")

class BusinessException(Exception):
    """Base class for business exceptions."""
    def __init__(self, message: str, code: int = 400, detail: Any = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.detail = detail


class NotFound(BusinessException):
    """Entity with the requested identity does not exist."""
    def __init__(self, message: str = "Entity not found", detail: Any = None):
        super().__init__(message, code=404, detail=detail)


class ValidationFailure(BusinessException):
    """Arguments rejected before reaching the store."""
    def __init__(self, message: str, detail: Any = None):
        super().__init__(message, code=422, detail=detail)


class InvalidRange(ValidationFailure):
    """Lower bound of a range is greater than its upper bound."""
    def __init__(self, lower: Any, upper: Any):
        super().__init__(
            f"Invalid range: minimum {lower} is greater than maximum {upper}",
            detail={"min": lower, "max": upper},
        )


class StoreFailure(BusinessException):
    """The storage engine rejected an operation."""
    def __init__(self, message: str = "Storage engine failure", code: int = 500, detail: Any = None):
        super().__init__(message, code=code, detail=detail)


class CommitFailed(StoreFailure):
    def __init__(self, message: str = "Commit rejected by the storage engine", detail: Any = None):
        super().__init__(message, detail=detail)


class ConnectionLost(StoreFailure):
    def __init__(self, message: str = "Connection to the storage engine was lost", detail: Any = None):
        super().__init__(message, code=503, detail=detail)


class TransactionStateError(BusinessException):
    """begin/commit/rollback called out of order."""
    def __init__(self, message: str, detail: Any = None):
        super().__init__(message, code=409, detail=detail)


class TransactionAlreadyActive(TransactionStateError):
    def __init__(self):
        super().__init__("A transaction is already active")


class NoActiveTransaction(TransactionStateError):
    def __init__(self, operation: str = "operation"):
        super().__init__(f"Cannot {operation}: no active transaction")


class UnitOfWorkClosed(TransactionStateError):
    def __init__(self):
        super().__init__("Unit of work is closed")


def describe_exception(exc: Exception) -> str:
    """Log an exception and return the text shown to the user."""
    if isinstance(exc, BusinessException):
        logger.warning(f"BusinessError[{exc.code}]: {exc.message}")
        if isinstance(exc, StoreFailure) and exc.__cause__ is not None and settings.DEBUG:
            return f"{exc.message} ({exc.__cause__.__class__.__name__})"
        return exc.message

    if isinstance(exc, SQLAlchemyError):
        logger.critical(f"DatabaseError: {str(exc)}")
        return "Database temporarily unavailable"

    logger.opt(exception=exc).error(f"UncaughtException: {str(exc)}")
    return str(exc) or exc.__class__.__name__
