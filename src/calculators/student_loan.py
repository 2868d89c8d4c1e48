"""Student loan repayment calculator."""

from typing import Any

from src.calculators.tax_data import UK_TAX_DATA, TaxYearData


def calculate_student_loan_repayment(
    annual_income: float,
    data: TaxYearData = UK_TAX_DATA,
) -> dict[str, Any]:
    """Calculate annual student loan repayment.

    Repayment is charged at 9% on gross income strictly above the
    threshold. Pension and benefits do not affect it.

    Args:
        annual_income: Total annual gross income incl. bonus and overtime.
        data: Tax parameters to apply.

    Returns:
        Dict with annual_repayment, repayment_rate, annual_threshold.
    """
    sl = data.student_loan
    income_above_threshold = max(0.0, annual_income - sl.annual_threshold)
    repayment = income_above_threshold * sl.repayment_rate

    return {
        "annual_income": annual_income,
        "annual_repayment": repayment,
        "repayment_rate": sl.repayment_rate,
        "annual_threshold": sl.annual_threshold,
        "income_above_threshold": income_above_threshold,
    }
