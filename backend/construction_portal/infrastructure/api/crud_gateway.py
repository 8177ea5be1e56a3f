"""Generic httpx implementation of the CRUD gateway port."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from construction_portal.application.interfaces import CrudGateway
from construction_portal.domain.exceptions import UpstreamApiError
from construction_portal.infrastructure.api.mappers import map_list, unwrap
from construction_portal.infrastructure.api.upstream_client import UpstreamApiClient

T = TypeVar("T")


class HttpCrudGateway(CrudGateway[T], Generic[T]):
    """One REST collection at ``path``.

    Subclasses set ``path``, the envelope keys that wrap list and item
    responses, and the mapper from an upstream document to the entity.
    """

    path: str = ""
    list_keys: tuple[str, ...] = ("data",)
    item_keys: tuple[str, ...] = ("data",)
    mapper: Callable[[dict[str, Any]], T]

    def __init__(self, client: UpstreamApiClient):
        self._client = client

    def _map(self, doc: dict[str, Any]) -> T:
        return type(self).mapper(doc)

    def _map_many(self, body: Any) -> list[T]:
        return map_list(body, self._map, *self.list_keys)

    def _map_one(self, body: Any) -> T | None:
        doc = unwrap(body, *self.item_keys)
        if not isinstance(doc, dict):
            return None
        return self._map(doc)

    async def list(self, filters: dict[str, Any] | None = None) -> list[T]:
        body = await self._client.get(self.path, params=filters)
        return self._map_many(body)

    async def get(self, entity_id: str) -> T | None:
        try:
            body = await self._client.get(f"{self.path}/{entity_id}")
        except UpstreamApiError as e:
            if e.status_code == 404:
                return None
            raise
        return self._map_one(body)

    async def create(self, payload: dict[str, Any]) -> T | None:
        body = await self._client.post(self.path, json=payload)
        return self._map_one(body)

    async def update(self, entity_id: str, payload: dict[str, Any]) -> T:
        body = await self._client.put(f"{self.path}/{entity_id}", json=payload)
        entity = self._map_one(body)
        if entity is None:
            raise UpstreamApiError(502, f"Unexpected response updating {self.path}/{entity_id}", body)
        return entity

    async def delete(self, entity_id: str) -> bool:
        try:
            await self._client.delete(f"{self.path}/{entity_id}")
        except UpstreamApiError as e:
            if e.status_code == 404:
                return False
            raise
        return True
