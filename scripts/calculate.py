"""Command-line front end for the salary calculators.

Usage:
    python scripts/calculate.py convert 30000 --period annually
    python scripts/calculate.py uk-tax 2500 --period monthly --pension 5 --student-loan
"""

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from src.calculators.pay_period import PAY_PERIODS, SalaryInput, convert_salary_period
from src.calculators.tax_data import TAX_YEAR
from src.calculators.uk_tax import UK_PAY_PERIODS, UKSalaryInput, calculate_uk_tax
from src.forms import (
    CALCULATION_ERROR_MESSAGE,
    INVALID_AMOUNT_MESSAGE,
    field_bounds,
    initial_state,
    is_valid_amount,
    parse_amount,
    salary_breakdown,
    tax_breakdown,
)

logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def _number_or(default: float) -> Callable[[str], float]:
    """argparse type: parse a number, using the default for blank or malformed text."""

    def parse(text: str) -> float:
        return parse_amount(text) or default

    return parse


def check_bounds(parser: argparse.ArgumentParser, calculator: str, values: dict[str, float]) -> None:
    """Reject values outside the form bounds in forms.yaml."""
    for field, value in values.items():
        bounds = field_bounds(calculator, field)
        low, high = bounds.get("min"), bounds.get("max")
        if (low is not None and value < low) or (high is not None and value > high):
            name = "amount" if field == "amount" else "--" + field.replace("_", "-")
            limits = f"at least {low}" if high is None else f"between {low} and {high}"
            parser.error(f"{name} must be {limits}")


def build_parser() -> argparse.ArgumentParser:
    salary = initial_state("salary")
    uk = initial_state("uk_tax")

    parser = argparse.ArgumentParser(description="Salary period converter and UK take-home calculator")
    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="Convert a salary between pay periods")
    convert.add_argument("amount", help="Salary amount in the given period")
    convert.add_argument("--period", choices=PAY_PERIODS, default=salary["period"])
    convert.add_argument("--hours-per-day", type=_number_or(salary["hours_per_day"]), default=salary["hours_per_day"])
    convert.add_argument("--days-per-week", type=_number_or(salary["days_per_week"]), default=salary["days_per_week"])
    convert.add_argument("--weeks-per-year", type=_number_or(salary["weeks_per_year"]), default=salary["weeks_per_year"])

    tax = sub.add_parser("uk-tax", help="Calculate UK take-home pay")
    tax.add_argument("amount", help="Gross salary in the given period")
    tax.add_argument("--period", choices=sorted(UK_PAY_PERIODS), default=uk["period"])
    tax.add_argument("--student-loan", action="store_true")
    tax.add_argument("--scotland", action="store_true", help="Recorded only; Scottish bands are not applied")
    tax.add_argument("--tax-code", default=uk["tax_code"], help="Recorded only; not parsed")
    tax.add_argument("--bonus", type=parse_amount, default=uk["bonus"])
    tax.add_argument("--overtime", type=parse_amount, default=uk["overtime"])
    tax.add_argument("--taxable-benefits", type=parse_amount, default=uk["taxable_benefits"])
    tax.add_argument("--pension", type=parse_amount, default=uk["pension"], help="Percentage of gross")

    return parser


def run_convert(args: argparse.Namespace, amount: float) -> list[dict]:  # type: ignore[type-arg]
    result = convert_salary_period(
        SalaryInput(
            amount=amount,
            period=args.period,
            hours_per_day=args.hours_per_day,
            days_per_week=args.days_per_week,
            weeks_per_year=args.weeks_per_year,
        )
    )
    return salary_breakdown(result, args.period)


def run_uk_tax(args: argparse.Namespace, amount: float) -> list[dict]:  # type: ignore[type-arg]
    result = calculate_uk_tax(
        UKSalaryInput(
            amount=amount,
            period=args.period,
            is_scotland_resident=args.scotland,
            tax_code=args.tax_code,
            student_loan=args.student_loan,
            bonus=args.bonus,
            overtime=args.overtime,
            taxable_benefits=args.taxable_benefits,
            pension=args.pension,
        )
    )
    return tax_breakdown(result)


def main() -> None:
    """Parse arguments, run the chosen calculator and print the breakdown."""
    parser = build_parser()
    args = parser.parse_args()

    amount = parse_amount(args.amount)
    if not is_valid_amount(amount):
        print(INVALID_AMOUNT_MESSAGE, file=sys.stderr)
        sys.exit(1)

    if args.command == "convert":
        fields = ("hours_per_day", "days_per_week", "weeks_per_year")
        check_bounds(parser, "salary", {"amount": amount, **{f: getattr(args, f) for f in fields}})
    else:
        fields = ("bonus", "overtime", "taxable_benefits", "pension")
        check_bounds(parser, "uk_tax", {"amount": amount, **{f: getattr(args, f) for f in fields}})

    try:
        if args.command == "convert":
            rows = run_convert(args, amount)
        else:
            rows = run_uk_tax(args, amount)
    except Exception:
        logger.exception(CALCULATION_ERROR_MESSAGE)
        sys.exit(1)

    if args.command == "uk-tax":
        print(f"UK tax year {TAX_YEAR} ({args.period})")
    for row in rows:
        marker = " *" if row.get("active") else ""
        print(f"  {row['label']:<20} {row['formatted']:>14}{marker}")


if __name__ == "__main__":
    main()
