"""
In-memory repository implementation.
"""
from typing import Any, Dict, Generic, Iterable, List, Optional, TypeVar

from got_members.config.logging_config import get_logger
from got_members.utils.error_handling import RepositoryError

from .base_repository import BaseRepository

T = TypeVar('T')
logger = get_logger(__name__)


class InMemoryRepository(BaseRepository[T], Generic[T]):
    """In-memory repository implementation.

    Entities are keyed by their ``id`` attribute and served in the
    order they were supplied. The store is fixed at construction.
    """

    def __init__(self, entities: Optional[Iterable[T]] = None):
        """Initialize the repository from a collection of entities.

        Args:
            entities: Entities to serve, each with a unique ``id``

        Raises:
            RepositoryError: If an entity has no ``id`` or an ``id`` repeats
        """
        self._store: Dict[Any, T] = {}
        for entity in entities or ():
            self._add(entity)
        logger.debug(f"In-memory repository holds {len(self._store)} entities")

    def _add(self, entity: T) -> None:
        if not hasattr(entity, 'id'):
            error = RepositoryError("Entity must have an 'id' attribute", details={"entity": repr(entity)})
            self.handle_error(error, "add")
            raise error

        entity_id = getattr(entity, 'id')
        if entity_id in self._store:
            error = RepositoryError(f"Duplicate entity ID {entity_id}", details={"id": entity_id})
            self.handle_error(error, "add")
            raise error

        self._store[entity_id] = entity

    def get_all(self) -> List[T]:
        """Retrieve all entities.

        Returns:
            List[T]: A new list of entities in insertion order
        """
        return list(self._store.values())

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an entity by its ID.

        Args:
            id: Entity identifier

        Returns:
            Optional[T]: Entity if found, None otherwise
        """
        return self._store.get(id)

    def __len__(self) -> int:
        return len(self._store)
