"""Repair the unique index on the upstream ``attendances`` collection.

Older databases carry ``employee_1_date_1`` from when attendance was keyed by
employee; it rejects every second labourer marked on the same day. This drops
it and makes sure ``labour_1_date_1`` (unique on labour + date) exists.

Run with: python -m construction_portal.scripts.fix_attendance_index
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import OperationFailure, PyMongoError

from construction_portal.config import get_settings
from construction_portal.infrastructure.logging.log_config import setup_logging

logger = logging.getLogger(__name__)

ATTENDANCE_COLLECTION = "attendances"
LEGACY_INDEX = "employee_1_date_1"
LABOUR_DATE_INDEX = "labour_1_date_1"


@dataclass
class IndexMigrationResult:
    before: list[str] = field(default_factory=list)
    after: list[str] = field(default_factory=list)
    dropped_legacy: bool = False
    created_labour_index: bool = False


async def _index_names(collection: Any) -> list[str]:
    info = await collection.index_information()
    return list(info.keys())


async def fix_attendance_index(db: Any) -> IndexMigrationResult:
    """Drop the legacy employee/date index and ensure the labour/date one."""
    collection = db[ATTENDANCE_COLLECTION]
    result = IndexMigrationResult(before=await _index_names(collection))
    logger.info("Current indexes: %s", result.before)

    if LEGACY_INDEX in result.before:
        logger.info("Dropping old %s index", LEGACY_INDEX)
        await collection.drop_index(LEGACY_INDEX)
        result.dropped_legacy = True
    else:
        logger.info("%s index not found", LEGACY_INDEX)

    if LABOUR_DATE_INDEX not in result.before:
        logger.info("Creating %s index", LABOUR_DATE_INDEX)
        await collection.create_index(
            [("labour", 1), ("date", 1)], unique=True, name=LABOUR_DATE_INDEX
        )
        result.created_labour_index = True
    else:
        logger.info("%s index already exists", LABOUR_DATE_INDEX)

    result.after = await _index_names(collection)
    logger.info("Final indexes: %s", result.after)
    return result


async def main() -> int:
    settings = get_settings()
    client = AsyncIOMotorClient(settings.mongodb_uri)
    try:
        await fix_attendance_index(client[settings.mongodb_database])
    except OperationFailure as e:
        # 11000: existing attendance rows already violate labour + date uniqueness
        logger.error("Index migration failed (code %s): %s", e.code, e)
        return 1
    except PyMongoError:
        logger.exception("Index migration failed")
        return 1
    finally:
        client.close()
    logger.info("Migration completed successfully")
    return 0


if __name__ == "__main__":
    setup_logging()
    raise SystemExit(asyncio.run(main()))
