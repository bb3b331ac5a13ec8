"""
Repository pattern: data access abstraction, decouples service layer from database session.
"""

from .base import BaseRepository, IRepository
from .unit_of_work import TransactionState, UnitOfWork

__all__ = ["BaseRepository", "IRepository", "TransactionState", "UnitOfWork"]
