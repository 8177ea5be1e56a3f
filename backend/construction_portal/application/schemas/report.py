"""Pydantic DTOs for report downloads."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class ExpenseReportRequest(BaseModel):
    report_types: list[Literal["income", "expense"]] = Field(..., min_length=1)
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def _end_after_start(self) -> "ExpenseReportRequest":
        if self.end_date < self.start_date:
            raise ValueError("End date must be after start date")
        return self
