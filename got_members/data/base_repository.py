"""
Base repository interface for data sources.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from got_members.config.logging_config import get_logger

T = TypeVar('T')
logger = get_logger(__name__)


class BaseRepository(Generic[T], ABC):
    """Base class for all repository implementations.

    The query layer only needs ``get_all``; a repository is read once
    and its result treated as an immutable snapshot.

    Generic type T represents the entity model being served.
    """

    @abstractmethod
    def get_all(self) -> List[T]:
        """Retrieve every entity currently known.

        Returns:
            List[T]: A new list of entities
        """
        pass

    @abstractmethod
    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an entity by its ID.

        Args:
            id: Entity identifier

        Returns:
            Optional[T]: Entity if found, None otherwise
        """
        pass

    def handle_error(self, error: Exception, operation: str) -> Dict[str, Any]:
        """Handle repository errors in a consistent way.

        Args:
            error: The exception that occurred
            operation: Name of the repository operation that failed

        Returns:
            Dict[str, Any]: Error information
        """
        error_info = {
            "repository": self.__class__.__name__,
            "operation": operation,
            "error_type": type(error).__name__,
            "error_message": str(error)
        }

        logger.error(f"Repository error: {error_info}")
        return error_info
