"""UK take-home pay calculator — composites income tax, NI, pension and student loan."""

import logging
from typing import NamedTuple

from src.calculators.income_tax import calculate_income_tax
from src.calculators.national_insurance import calculate_national_insurance
from src.calculators.student_loan import calculate_student_loan_repayment
from src.calculators.tax_data import UK_TAX_DATA

logger = logging.getLogger(__name__)

UK_PAY_PERIODS: dict[str, int] = {
    "monthly": 12,
    "annually": 1,
}


class UKSalaryInput(NamedTuple):
    """Gross salary inputs for a UK take-home pay calculation."""

    amount: float
    period: str = "annually"
    is_scotland_resident: bool = False  # captured, Scottish bands not applied
    tax_code: str = "1257L"  # captured, not parsed
    student_loan: bool = False
    bonus: float = 0.0
    overtime: float = 0.0
    taxable_benefits: float = 0.0
    pension: float = 0.0  # percentage of gross, 0-100


class TaxResult(NamedTuple):
    """Take-home breakdown, expressed in the input's pay period."""

    take_home: float
    gross: float
    taxable_income: float
    tax: float
    national_insurance: float


def calculate_uk_tax(data: UKSalaryInput) -> TaxResult:
    """Calculate UK take-home pay from gross salary inputs.

    Everything is computed on annual figures and scaled back to the
    input period at the end. Any period other than "monthly" is treated
    as annual. Never raises for numeric input.

    The reported taxable_income is gross less pension plus taxable
    benefits, without the personal allowance subtracted; the figure
    actually taxed is net of the allowance.
    """
    periods = UK_PAY_PERIODS.get(data.period, 1)
    annual_amount = data.amount * periods
    total_gross = annual_amount + data.bonus + data.overtime
    pension_deduction = total_gross * (data.pension / 100)

    taxable_income = max(
        0,
        total_gross - pension_deduction + data.taxable_benefits - UK_TAX_DATA.personal_allowance,
    )
    tax = calculate_income_tax(taxable_income)["total_tax"]
    ni = calculate_national_insurance(total_gross - pension_deduction)["annual_ni"]

    student_loan_repayment = 0.0
    if data.student_loan:
        student_loan_repayment = calculate_student_loan_repayment(total_gross)["annual_repayment"]

    take_home = total_gross - tax - ni - pension_deduction - student_loan_repayment

    logger.debug(
        "UK tax: gross=%s pension=%s tax=%s ni=%s student_loan=%s",
        total_gross, pension_deduction, tax, ni, student_loan_repayment,
    )

    multiplier = 1 / periods
    return TaxResult(
        take_home=take_home * multiplier,
        gross=total_gross * multiplier,
        taxable_income=(total_gross - pension_deduction + data.taxable_benefits) * multiplier,
        tax=tax * multiplier,
        national_insurance=ni * multiplier,
    )
