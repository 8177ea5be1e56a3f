"""Domain entity for labourers — site workers paid from a project budget."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class SkillLevel(str, Enum):
    """Skill grades used by the upstream labour register."""

    SKILLED = "Skilled"
    NON_SKILLED = "Non"


class LabourStatus(str, Enum):
    """Employment status of a labourer."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    TERMINATED = "terminated"


@dataclass
class Labourer:
    """A worker tied to a construction project.

    ``labour_code`` is the human-facing register number generated upstream
    (``JHC/LAB/0001``); ``id`` is the upstream document id.
    """

    id: str
    name: str
    contact: str
    base_salary: float
    project_id: str | None = None
    labour_code: str | None = None
    skill_level: SkillLevel = SkillLevel.NON_SKILLED
    status: LabourStatus = LabourStatus.ACTIVE
    created_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status == LabourStatus.ACTIVE
