"""Domain entity for the dashboard's month-to-date money figures."""

from dataclasses import dataclass


@dataclass
class DashboardStats:
    total_income: float = 0.0
    total_expenses: float = 0.0
    current_balance: float = 0.0
    transaction_count: int = 0
