"""Abstract CRUD port shared by every upstream entity gateway."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class CrudGateway(ABC, Generic[T]):
    """Port for one upstream REST resource — implemented in the infrastructure layer.

    Payloads are plain dicts already shaped for the upstream API.
    """

    @abstractmethod
    async def list(self, filters: dict[str, Any] | None = None) -> list[T]:
        """Retrieve the resource list, optionally narrowed by query filters."""
        ...

    @abstractmethod
    async def get(self, entity_id: str) -> T | None:
        """Retrieve one entity, or None when upstream reports it missing."""
        ...

    @abstractmethod
    async def create(self, payload: dict[str, Any]) -> T | None:
        """Create an entity and return it as stored upstream."""
        ...

    @abstractmethod
    async def update(self, entity_id: str, payload: dict[str, Any]) -> T:
        """Replace the given fields of an existing entity."""
        ...

    @abstractmethod
    async def delete(self, entity_id: str) -> bool:
        """Delete an entity. Returns True if deleted, False if not found."""
        ...
