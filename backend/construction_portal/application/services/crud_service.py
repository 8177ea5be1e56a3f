"""Shared list/get/create/update/delete use cases over one gateway."""

import logging
from typing import Any, Generic, TypeVar

from construction_portal.application.interfaces import CrudGateway
from construction_portal.application.schemas.common import ApiPayload, TableParams
from construction_portal.domain.exceptions import EntityNotFoundError
from construction_portal.domain.table_query import TablePage, apply_table_query

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CrudService(Generic[T]):
    """Fetch list → create → update → delete, for one upstream collection.

    ``search_fields`` are the entity attributes the table search box covers;
    ``sortable_fields`` are the scalar attributes a list may be ordered by.
    """

    entity_name: str = "Entity"
    search_fields: tuple[str, ...] = ("name",)
    sortable_fields: tuple[str, ...] = ("name",)

    def __init__(self, gateway: CrudGateway[T]):
        self._gateway = gateway

    async def list(
        self,
        params: TableParams | None = None,
        *,
        upstream_filters: dict[str, Any] | None = None,
        filters: dict[str, Any] | None = None,
    ) -> TablePage[T]:
        rows = await self._gateway.list(upstream_filters)
        query = (params or TableParams()).to_query(
            self.search_fields, filters, self.sortable_fields
        )
        return apply_table_query(rows, query)

    async def get(self, entity_id: str) -> T:
        entity = await self._gateway.get(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity

    async def create(self, data: ApiPayload) -> T | None:
        entity = await self._gateway.create(data.to_api())
        logger.info("Created %s", self.entity_name)
        return entity

    async def update(self, entity_id: str, data: ApiPayload) -> T:
        return await self._gateway.update(entity_id, data.changed_fields())

    async def delete(self, entity_id: str) -> None:
        deleted = await self._gateway.delete(entity_id)
        if not deleted:
            raise EntityNotFoundError(self.entity_name, entity_id)
        logger.info("Deleted %s %s", self.entity_name, entity_id)
