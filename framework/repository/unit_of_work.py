"""
Unit of Work: owns the session, its repositories and the transaction boundaries.
"""

from enum import Enum
from typing import Optional
from sqlalchemy.exc import DBAPIError, DisconnectionError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.exceptions.handler import (
    StoreFailure,
    CommitFailed,
    ConnectionLost,
    TransactionAlreadyActive,
    NoActiveTransaction,
    UnitOfWorkClosed,
)
from framework.logging.logger import get_logger

logger = get_logger("unit_of_work")


class TransactionState(str, Enum):
    """Unit of work lifecycle."""
    IDLE = "IDLE"
    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"


def _is_connection_error(exc: SQLAlchemyError) -> bool:
    if isinstance(exc, DisconnectionError):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


class UnitOfWork:
    """Shares one session across repositories and controls commit/rollback.

    Subclasses build their repositories in ``__init__``. Use as an async
    context manager so the session is released exactly once::

        async with ProductUnitOfWork(driver.new_session()) as uow:
            ...
    """

    def __init__(self, session: Optional[AsyncSession] = None):
        """Initialize UnitOfWork over a session it will own until close()."""
        if session is None:
            raise ValueError("Session must be provided, e.g. DatabaseManager.get_instance().sql.new_session()")

        self.session = session
        self.state = TransactionState.IDLE

    @property
    def is_active(self) -> bool:
        return self.state is TransactionState.ACTIVE

    def _ensure_open(self) -> None:
        if self.state is TransactionState.CLOSED:
            raise UnitOfWorkClosed()

    async def begin_transaction(self) -> None:
        """Open a transaction on the session."""
        self._ensure_open()
        if self.is_active:
            raise TransactionAlreadyActive()
        try:
            await self.session.begin()
        except SQLAlchemyError as e:
            if _is_connection_error(e):
                raise ConnectionLost(str(e)) from e
            raise StoreFailure(f"Failed to begin transaction: {e}") from e
        self.state = TransactionState.ACTIVE
        logger.debug("Transaction started")

    async def save_changes(self) -> bool:
        """Flush staged changes inside the current transaction; True if anything was written."""
        self._ensure_open()
        if not self.is_active:
            raise NoActiveTransaction("save changes")

        pending = len(self.session.new) + len(self.session.deleted)
        pending += sum(1 for obj in self.session.dirty if self.session.is_modified(obj))
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.warning(f"Flush failed: {e}")
            if _is_connection_error(e):
                raise ConnectionLost(str(e)) from e
            raise StoreFailure(f"Failed to save changes: {e}") from e
        return pending > 0

    async def commit_transaction(self) -> None:
        """Commit all changes made since begin_transaction."""
        self._ensure_open()
        if not self.is_active:
            raise NoActiveTransaction("commit")
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            # Still ACTIVE: caller is expected to roll back
            logger.error(f"Commit failed: {e}")
            if _is_connection_error(e):
                raise ConnectionLost(str(e)) from e
            raise CommitFailed(f"Commit failed: {e}") from e
        self.session.expunge_all()
        self.state = TransactionState.IDLE
        logger.debug("Transaction committed")

    async def rollback_transaction(self) -> None:
        """Discard all changes made since begin_transaction."""
        self._ensure_open()
        if not self.is_active:
            raise NoActiveTransaction("roll back")
        try:
            await self.session.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Rollback failed: {e}")
            raise ConnectionLost(f"Rollback failed: {e}") from e
        finally:
            self.session.expunge_all()
            self.state = TransactionState.IDLE
        logger.debug("Transaction rolled back")

    async def close(self) -> None:
        """Release the session; a second call is a no-op."""
        if self.state is TransactionState.CLOSED:
            return
        try:
            if self.is_active:
                logger.warning("Closing unit of work with an open transaction, rolling back")
                await self.session.rollback()
        finally:
            self.state = TransactionState.CLOSED
            await self.session.close()

    async def __aenter__(self):
        self._ensure_open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
