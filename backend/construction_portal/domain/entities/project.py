"""Domain entities for construction sites and their schedules."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .directory import Customer


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    ACTIVE = "active"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class Project:
    """A construction site with budget, schedule, supervisor and customer.

    ``customer`` is set when the upstream response populated the customer
    reference; otherwise only ``customer_id`` is known.
    """

    id: str
    name: str
    supervisor: str
    location: str
    start_date: datetime | None = None
    end_date: datetime | None = None
    duration: int | None = None
    estimated_cost: float | None = None
    document_file_no: str | None = None
    project_code: str | None = None
    customer_id: str | None = None
    customer: Customer | None = None
    status: ProjectStatus = ProjectStatus.PLANNING
    progress: int = 0


class ScheduleSection(str, Enum):
    """Phases a site's work plan is split into."""

    PRE_PROJECT = "Pre-Project Process"
    PROJECT = "Project Process"
    HANDOVER = "Project Handover Process"


class WorkStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


@dataclass
class WorkSchedule:
    """A step of the site's work plan.

    ``step`` is the plan's own identifier (``"1.1"``, ``"2.3"``) and is what
    a payment schedule is matched on.
    """

    id: str
    project_id: str
    section: str
    step: str
    title: str
    status: WorkStatus = WorkStatus.PENDING
    start_date: datetime | None = None
    end_date: datetime | None = None
    time_frame: str = ""
    work_description: str = ""
    order: int = 0

    @property
    def is_completed(self) -> bool:
        return self.status == WorkStatus.COMPLETED


@dataclass
class PaymentSchedule:
    """A customer instalment attached to a work schedule step."""

    id: str
    project_id: str
    step: str
    payment_amount: float
    work_schedule_id: str | None = None
    section: str | None = None
    title: str = ""
    payment_status: PaymentStatus = PaymentStatus.PENDING
    due_date: datetime | None = None
    time_frame: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    order: int = 0
