"""Caller-side form handling: input parsing, validation, defaults, display breakdowns.

The calculators accept already-parsed numbers and never validate. Everything
a front end has to do around them (turning text into numbers, rejecting
empty amounts, resetting to initial values, labelling results) lives here
so the API and CLI share one behaviour.
"""

import re
from typing import Any

from config import load_yaml_config
from config.settings import settings
from src.calculators.formatting import format_gbp, format_usd
from src.calculators.pay_period import SalaryResult
from src.calculators.uk_tax import TaxResult

INVALID_AMOUNT_MESSAGE = "Please enter a valid amount"
CALCULATION_ERROR_MESSAGE = "Error calculating salary"

FORM_CONFIG: dict[str, Any] = load_yaml_config(settings.forms_config)

SALARY_LABELS: tuple[tuple[str, str], ...] = (
    ("Hourly", "hourly"),
    ("Daily", "daily"),
    ("Weekly", "weekly"),
    ("Monthly", "monthly"),
    ("Annually", "annually"),
)

TAX_LABELS: tuple[tuple[str, str], ...] = (
    ("Take home", "take_home"),
    ("Gross", "gross"),
    ("Taxable income", "taxable_income"),
    ("Tax", "tax"),
    ("National insurance", "national_insurance"),
)

# Leading decimal number, optionally signed, with optional exponent.
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


def parse_amount(text: str | None) -> float:
    """Parse a text field into a number, falling back to 0.0.

    Reads the longest leading number ("1200abc" -> 1200.0) and ignores
    the rest. Empty, missing or unparseable input gives 0.0.
    """
    if text is None:
        return 0.0
    match = _LEADING_NUMBER_RE.match(text)
    if match is None:
        return 0.0
    # "-0" reads as plain zero.
    return float(match.group(1).replace("Infinity", "inf")) or 0.0


def is_valid_amount(amount: float) -> bool:
    """An amount is accepted for calculation only if strictly positive."""
    return amount > 0


def initial_state(calculator: str) -> dict[str, Any]:
    """Initial (reset) form values for "salary" or "uk_tax"."""
    return dict(FORM_CONFIG[calculator]["initial"])


def field_bounds(calculator: str, field: str) -> dict[str, float]:
    """Min/max bounds for a form field, empty if unbounded."""
    return dict(FORM_CONFIG[calculator]["bounds"].get(field, {}))


def salary_breakdown(result: SalaryResult, active_period: str) -> list[dict[str, Any]]:
    """Label and format each period rate, flagging the period that was entered."""
    return [
        {
            "label": label,
            "period": period,
            "amount": getattr(result, period),
            "formatted": format_usd(getattr(result, period)),
            "active": period == active_period,
        }
        for label, period in SALARY_LABELS
    ]


def tax_breakdown(result: TaxResult) -> list[dict[str, Any]]:
    """Label and format each take-home figure."""
    return [
        {
            "label": label,
            "amount": getattr(result, field),
            "formatted": format_gbp(getattr(result, field)),
        }
        for label, field in TAX_LABELS
    ]
