"""Site financial figures computed from already-fetched transactions and schedules."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone

from construction_portal.domain.entities import (
    LabourSalary,
    PaymentSchedule,
    Subcontractor,
    Transaction,
    TransactionCategory,
    TransactionTotals,
    TransactionType,
    WorkSchedule,
)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class FinancialSummary:
    """Profit picture of one site.

    ``subcontractor_expenses`` is reported for information only; the cost of
    subcontractors enters ``total_expenses`` through their appointments.
    """

    current_profit: float = 0.0
    last_income: float = 0.0
    last_income_date: datetime | None = None
    material_cost: float = 0.0
    labourer_salary: float = 0.0
    paid_labourer_salary: float = 0.0
    subcontractor_expenses: float = 0.0
    appointed_subcontractor_expenses: float = 0.0
    total_expenses: float = 0.0
    total_revenue: float = 0.0


@dataclass
class TaskProgress:
    total_amount: float = 0.0
    completed_amount: float = 0.0

    @property
    def percent_complete(self) -> float:
        if self.total_amount <= 0:
            return 0.0
        return round(self.completed_amount / self.total_amount * 100, 2)


@dataclass
class PaidSalaryTotal:
    total_paid: float
    count: int


def sum_amounts(
    transactions: Iterable[Transaction],
    *,
    type: TransactionType | None = None,
    category: TransactionCategory | str | None = None,
) -> float:
    """Sum ``amount`` over transactions matching the optional type and category."""
    wanted_category = category.value if isinstance(category, TransactionCategory) else category
    total = 0.0
    for t in transactions:
        if type is not None and t.type != type:
            continue
        if wanted_category is not None and t.category != wanted_category:
            continue
        total += t.amount or 0.0
    return total


def transaction_totals(transactions: Sequence[Transaction]) -> TransactionTotals:
    income = [t for t in transactions if t.type == TransactionType.INCOME]
    expense = [t for t in transactions if t.type == TransactionType.EXPENSE]
    total_income = sum_amounts(income)
    total_expense = sum_amounts(expense)
    return TransactionTotals(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
        income_count=len(income),
        expense_count=len(expense),
    )


def appointed_subcontractor_cost(
    subcontractors: Iterable[Subcontractor], project_id: str
) -> float:
    """Cost of every subcontractor appointed to ``project_id`` (first appointment each)."""
    total = 0.0
    for sub in subcontractors:
        appointment = sub.appointment_for(project_id)
        if appointment is not None:
            total += appointment.cost or 0.0
    return total


def paid_salary_total(salaries: Iterable[LabourSalary]) -> PaidSalaryTotal:
    salaries = list(salaries)
    return PaidSalaryTotal(
        total_paid=sum(s.amount or 0.0 for s in salaries),
        count=len(salaries),
    )


def compute_financial_summary(
    transactions: Sequence[Transaction],
    *,
    total_income: float,
    paid_salary_total: float = 0.0,
    appointed_subcontractor_total: float = 0.0,
) -> FinancialSummary:
    """Subtract category-bucketed expenses from income.

    ``total_income`` comes from the upstream summary, which covers every
    transaction of the project and not just the fetched page.
    """
    expense = TransactionType.EXPENSE
    material_cost = sum_amounts(transactions, type=expense, category=TransactionCategory.MATERIALS)
    labourer_salary = sum_amounts(transactions, type=expense, category=TransactionCategory.LABOR)
    subcontractor_expenses = sum_amounts(
        transactions, type=expense, category=TransactionCategory.SUBCONTRACTOR
    )

    incomes = sorted(
        (t for t in transactions if t.type == TransactionType.INCOME),
        key=lambda t: _aware(t.date),
        reverse=True,
    )
    last_income = incomes[0] if incomes else None

    total_expenses = (
        material_cost + labourer_salary + paid_salary_total + appointed_subcontractor_total
    )
    return FinancialSummary(
        current_profit=total_income - total_expenses,
        last_income=last_income.amount if last_income else 0.0,
        last_income_date=last_income.date if last_income else None,
        material_cost=material_cost,
        labourer_salary=labourer_salary,
        paid_labourer_salary=paid_salary_total,
        subcontractor_expenses=subcontractor_expenses,
        appointed_subcontractor_expenses=appointed_subcontractor_total,
        total_expenses=total_expenses,
        total_revenue=total_income,
    )


def match_payment_schedule(
    schedule: WorkSchedule, payment_schedules: Sequence[PaymentSchedule]
) -> PaymentSchedule | None:
    """Find the instalment for a work step: by id, then step+section, then step."""
    for matches in (
        lambda ps: ps.work_schedule_id == schedule.id,
        lambda ps: ps.step == schedule.step and ps.section == schedule.section,
        lambda ps: ps.step == schedule.step,
    ):
        found = next((ps for ps in payment_schedules if matches(ps)), None)
        if found is not None:
            return found
    return None


def compute_task_progress(
    work_schedules: Sequence[WorkSchedule], payment_schedules: Sequence[PaymentSchedule]
) -> TaskProgress:
    progress = TaskProgress()
    for schedule in work_schedules:
        payment = match_payment_schedule(schedule, payment_schedules)
        amount = payment.payment_amount if payment else 0.0
        progress.total_amount += amount
        if schedule.is_completed:
            progress.completed_amount += amount
    return progress


def _aware(value: datetime | None) -> datetime:
    if value is None:
        return _EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
