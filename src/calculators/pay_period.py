"""Pay period converter — one salary figure expressed across all periods."""

import math
from typing import NamedTuple

DEFAULT_HOURS_PER_DAY = 8
DEFAULT_DAYS_PER_WEEK = 5
DEFAULT_WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12

PAY_PERIODS: tuple[str, ...] = ("hourly", "daily", "weekly", "monthly", "annually")


class SalaryInput(NamedTuple):
    """A salary amount in one pay period plus the working pattern."""

    amount: float
    period: str
    hours_per_day: float | None = None
    days_per_week: float | None = None
    weeks_per_year: float | None = None


class SalaryResult(NamedTuple):
    """Equivalent rates for every pay period."""

    hourly: float
    daily: float
    weekly: float
    monthly: float
    annually: float


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: x/0 gives +-inf, 0/0 gives nan."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def convert_salary_period(data: SalaryInput) -> SalaryResult:
    """Convert a salary amount into hourly, daily, weekly, monthly and annual rates.

    The hourly rate is derived first, then every other period is built
    up from it. An unrecognised period yields an hourly rate of zero.
    No validation is done: zero or negative inputs scale through, and a
    zero working pattern produces inf/nan rather than an error.

    Args:
        data: Amount, its period, and optional working pattern
            (defaults 8 hours/day, 5 days/week, 52 weeks/year).

    Returns:
        SalaryResult with all five period rates.
    """
    hours_per_day = DEFAULT_HOURS_PER_DAY if data.hours_per_day is None else data.hours_per_day
    days_per_week = DEFAULT_DAYS_PER_WEEK if data.days_per_week is None else data.days_per_week
    weeks_per_year = DEFAULT_WEEKS_PER_YEAR if data.weeks_per_year is None else data.weeks_per_year

    if data.period == "hourly":
        hourly = data.amount
    elif data.period == "daily":
        hourly = _divide(data.amount, hours_per_day)
    elif data.period == "weekly":
        hourly = _divide(data.amount, hours_per_day * days_per_week)
    elif data.period == "monthly":
        hourly = _divide(data.amount, hours_per_day * days_per_week * weeks_per_year / MONTHS_PER_YEAR)
    elif data.period == "annually":
        hourly = _divide(data.amount, hours_per_day * days_per_week * weeks_per_year)
    else:
        hourly = 0.0

    daily = hourly * hours_per_day
    weekly = daily * days_per_week
    monthly = weekly * weeks_per_year / MONTHS_PER_YEAR
    annually = monthly * MONTHS_PER_YEAR

    return SalaryResult(
        hourly=hourly,
        daily=daily,
        weekly=weekly,
        monthly=monthly,
        annually=annually,
    )
