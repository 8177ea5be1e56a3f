"""Shared DTO building blocks."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from construction_portal.domain.exceptions import InvalidTableQueryError
from construction_portal.domain.table_query import TableQuery

T = TypeVar("T")


class ApiPayload(BaseModel):
    """Request body that is forwarded upstream.

    Accepts snake_case or camelCase from portal clients; ``to_api()`` emits
    the camelCase JSON the construction API expects.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_api(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def changed_fields(self) -> dict[str, Any]:
        """Only the fields the client actually sent, for partial updates."""
        return self.model_dump(
            mode="json", by_alias=True, exclude_none=True, exclude_unset=True
        )


class TablePageResponse(BaseModel, Generic[T]):
    """One page of a list view plus paging metadata."""

    items: list[T]
    total: int
    page: int
    pages: int
    page_size: int


class TableParams(BaseModel):
    """Search / sort / paging knobs accepted by every list endpoint."""

    search: str | None = None
    sort_by: str | None = None
    sort_desc: bool = False
    page: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1, le=500)

    def to_query(
        self,
        search_fields: tuple[str, ...],
        filters: dict[str, Any] | None = None,
        sortable_fields: tuple[str, ...] | None = None,
    ) -> TableQuery:
        """Build the table query; ``sort_by`` must name one of ``sortable_fields``."""
        if self.sort_by and sortable_fields is not None and self.sort_by not in sortable_fields:
            raise InvalidTableQueryError(self.sort_by, sortable_fields)
        return TableQuery(
            search=self.search,
            search_fields=search_fields,
            filters=filters or {},
            sort_by=self.sort_by,
            sort_desc=self.sort_desc,
            page=self.page,
            page_size=self.page_size,
        )
