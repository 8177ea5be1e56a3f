"""Display helpers shared by views — prices, durations, fallbacks, landing pages."""

import math
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

NOT_AVAILABLE = "N/A"

_ROLE_LANDING_PAGES = {
    "supervisor": "/supervisordash",
    "manager": "/dashboard",
    "employee": "/employee",
}
_DEFAULT_LANDING_PAGE = "/dashboard"


def format_price(value: Any) -> str:
    """Render an amount as ``1,234,567.89``; ``"N/A"`` for missing or non-numeric input."""
    if value is None or value == NOT_AVAILABLE or isinstance(value, bool):
        return NOT_AVAILABLE
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return NOT_AVAILABLE
    if not number.is_finite():
        return NOT_AVAILABLE
    rounded = number.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    # Amounts that round to zero print as "0.00", never "-0.00".
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:,.2f}"


def calculate_duration_in_days(
    start: date | datetime | None, end: date | datetime | None
) -> int:
    """Whole days between two bounds, rounded up; 0 when either is missing."""
    if start is None or end is None:
        return 0
    if isinstance(start, datetime) != isinstance(end, datetime):
        start = start.date() if isinstance(start, datetime) else start
        end = end.date() if isinstance(end, datetime) else end
    delta = abs(end - start)
    return math.ceil(delta.total_seconds() / 86400)


def get_property(
    obj: Mapping[str, Any], primary_key: str, fallback_keys: Sequence[str] = ()
) -> Any:
    """First non-null value among ``primary_key`` and ``fallback_keys``, else ``"N/A"``."""
    for key in (primary_key, *fallback_keys):
        value = obj.get(key)
        if value is not None:
            return value
    return NOT_AVAILABLE


def role_redirect_path(role: str | None, position: str | None = None) -> str:
    """Landing page for a freshly logged-in user; position overrides role."""
    key = (position or role or "").strip().lower()
    return _ROLE_LANDING_PAGES.get(key, _DEFAULT_LANDING_PAGE)
