"""
@file_name: base.py
@author: NetMind.AI
@date: 2025-11-28
@description: Repository base class

Responsibilities:
- Define a unified data access interface
- Provide a generic in-process keyed implementation
- Keep the collection private to the repository instance (no module-level state)

Design notes:
- BaseRepository is a generic class; subclasses specify the concrete entity type
- InMemoryRepository keeps entities in an insertion-ordered dict
- Each read-modify-write runs under a lock so the single-writer semantics hold
  even if the repository is shared across threads
"""

import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from loguru import logger
from pydantic import BaseModel

# Generic type variable
T = TypeVar('T', bound=BaseModel)


class BaseRepository(ABC, Generic[T]):
    """
    Repository interface

    Usage example:
        class EventRepository(InMemoryRepository[Event]):
            id_field = "id"

        repo = EventRepository()
        await repo.create(event)
        event = await repo.get_by_id("0b6c...")
    """

    # Subclasses may override
    id_field: str = "id"

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Insert a new entity and return it"""

    @abstractmethod
    async def update(self, entity_id: str, data: Dict[str, Any]) -> Optional[T]:
        """Merge fields into an existing entity; None if absent"""

    @abstractmethod
    async def get_by_id(self, entity_id: str) -> Optional[T]:
        """Get a single entity by ID"""

    @abstractmethod
    async def list_all(self) -> List[T]:
        """Snapshot of every entity in insertion order"""


class InMemoryRepository(BaseRepository[T]):
    """
    Process-lifetime keyed collection

    Entities are pydantic models; updates produce a new instance via
    model_copy so previously returned objects are never mutated.
    """

    def __init__(self):
        self._items: Dict[str, T] = {}
        self._lock = threading.Lock()

    def _entity_id(self, entity: T) -> str:
        entity_id = getattr(entity, self.id_field, None)
        if not entity_id:
            raise ValueError(f"Entity must have {self.id_field}")
        return entity_id

    async def create(self, entity: T) -> T:
        """
        Insert a new entity

        Args:
            entity: Entity object

        Returns:
            The stored entity

        Raises:
            ValueError: If the id is missing or already taken
        """
        entity_id = self._entity_id(entity)
        with self._lock:
            if entity_id in self._items:
                raise ValueError(f"{self.__class__.__name__}: duplicate {self.id_field} {entity_id}")
            self._items[entity_id] = entity
        logger.debug(f"    → {self.__class__.__name__}.create({entity_id})")
        return entity

    async def update(self, entity_id: str, data: Dict[str, Any]) -> Optional[T]:
        """
        Partially update an entity

        Args:
            entity_id: Entity ID
            data: Fields to update (python field names)

        Returns:
            Updated entity, or None if not found
        """
        with self._lock:
            current = self._items.get(entity_id)
            if current is None:
                return None
            updated = current.model_copy(update=data)
            self._items[entity_id] = updated
        logger.debug(f"    → {self.__class__.__name__}.update({entity_id}, fields={sorted(data)})")
        return updated

    async def get_by_id(self, entity_id: str) -> Optional[T]:
        with self._lock:
            return self._items.get(entity_id)

    async def list_all(self) -> List[T]:
        with self._lock:
            return list(self._items.values())

    def clear(self) -> None:
        """Remove every entity (tests and maintenance only)"""
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
