"""Unit tests for the attendance index maintenance script."""

import pytest

from construction_portal.scripts.fix_attendance_index import (
    ATTENDANCE_COLLECTION,
    LABOUR_DATE_INDEX,
    LEGACY_INDEX,
    fix_attendance_index,
)


class FakeCollection:
    """Just enough of a Motor collection for index maintenance."""

    def __init__(self, indexes: list[str]):
        self.indexes = {name: {} for name in indexes}
        self.created: list[tuple[list, dict]] = []

    async def index_information(self) -> dict:
        return dict(self.indexes)

    async def drop_index(self, name: str) -> None:
        del self.indexes[name]

    async def create_index(self, keys, **kwargs) -> str:
        self.created.append((keys, kwargs))
        self.indexes[kwargs["name"]] = {"key": keys, "unique": kwargs.get("unique", False)}
        return kwargs["name"]


@pytest.mark.asyncio
async def test_legacy_index_is_replaced():
    collection = FakeCollection(["_id_", LEGACY_INDEX])
    result = await fix_attendance_index({ATTENDANCE_COLLECTION: collection})

    assert result.dropped_legacy is True
    assert result.created_labour_index is True
    assert result.before == ["_id_", LEGACY_INDEX]
    assert result.after == ["_id_", LABOUR_DATE_INDEX]
    keys, options = collection.created[0]
    assert keys == [("labour", 1), ("date", 1)]
    assert options == {"unique": True, "name": LABOUR_DATE_INDEX}


@pytest.mark.asyncio
async def test_already_migrated_collection_is_left_alone():
    collection = FakeCollection(["_id_", LABOUR_DATE_INDEX])

    result = await fix_attendance_index({ATTENDANCE_COLLECTION: collection})

    assert result.dropped_legacy is False
    assert result.created_labour_index is False
    assert collection.created == []
    assert result.after == result.before
