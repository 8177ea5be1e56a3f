"""Domain entities for the company's external parties — suppliers, customers, subcontractors."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Supplier:
    """A material or service supplier."""

    id: str
    name: str
    category: str
    company_name: str = ""
    supplier_code: str | None = None
    type: str = "distributor"
    email: str | None = None
    phone: str | None = None
    city: str | None = None
    status: str = "active"
    rating: float | None = None


@dataclass
class Customer:
    """A client who commissions construction sites."""

    id: str
    name: str
    nic: str | None = None
    phone: str | None = None
    email: str | None = None
    company_name: str = ""
    customer_code: str | None = None
    type: str = "individual"
    street: str | None = None
    city: str | None = None
    state: str | None = None
    status: str = "active"

    @classmethod
    def placeholder(cls, name: str = "No Customer Assigned") -> "Customer":
        """Stand-in shown on a site page when no customer can be resolved."""
        return cls(id="", name=name, nic="N/A", phone="N/A", email="N/A", street="N/A")


@dataclass
class Appointment:
    """A subcontractor's engagement on one project."""

    project_id: str | None
    cost: float = 0.0
    start_date: datetime | None = None
    end_date: datetime | None = None
    appointed_at: datetime | None = None


@dataclass
class Subcontractor:
    """An external contracted party appointable to projects."""

    id: str
    name: str
    nic: str
    email: str
    phone: str
    contract_type: str
    address: str
    contract_id: str | None = None
    status: str = "active"
    appointments: list[Appointment] = field(default_factory=list)

    def appointment_for(self, project_id: str) -> Appointment | None:
        """First appointment on the given project, if any."""
        return next(
            (a for a in self.appointments if a.project_id and a.project_id == project_id),
            None,
        )
