"""Domain entities for materials: the stock catalog and deliveries to sites."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MaterialStatus(str, Enum):
    ORDERED = "ordered"
    RECEIVED = "received"
    IN_TRANSIT = "in-transit"
    CANCELLED = "cancelled"


@dataclass
class SiteMaterial:
    """A delivery of one material type to one project."""

    project_id: str
    material: str
    supplier: str
    amount: float
    amount_type: str
    id: str | None = None
    unit_cost: float = 0.0
    total_cost: float = 0.0
    received_date: datetime | None = None
    expected_date: datetime | None = None
    status: MaterialStatus = MaterialStatus.RECEIVED
    notes: str = ""


@dataclass
class CatalogMaterial:
    """A stock line in the material database: what is held, from whom, how much."""

    id: str
    material: str
    supplier: str
    amount: float
    amount_type: str
    received_date: datetime | None = None
    description: str = ""
    updated_on: datetime | None = None
