"""Employee National Insurance calculator."""

from typing import Any

from src.calculators.tax_data import UK_TAX_DATA, TaxYearData


def calculate_national_insurance(
    niable_income: float,
    data: TaxYearData = UK_TAX_DATA,
) -> dict[str, Any]:
    """Calculate annual Class 1 NI contributions.

    Charged on earnings after pension, before taxable benefits and the
    personal allowance are considered.

    Args:
        niable_income: Annual gross income less pension deduction.
        data: Tax parameters to apply.

    Returns:
        Dict with annual_ni, main_rate_ni, upper_rate_ni.
    """
    ni = data.national_insurance
    main_rate_ni = 0.0
    upper_rate_ni = 0.0

    if niable_income > ni.primary_threshold:
        if niable_income <= ni.upper_earnings_limit:
            main_rate_ni = (niable_income - ni.primary_threshold) * ni.main_rate
        else:
            main_rate_ni = (ni.upper_earnings_limit - ni.primary_threshold) * ni.main_rate
            upper_rate_ni = (niable_income - ni.upper_earnings_limit) * ni.upper_rate

    return {
        "niable_income": niable_income,
        "annual_ni": main_rate_ni + upper_rate_ni,
        "main_rate_ni": main_rate_ni,
        "upper_rate_ni": upper_rate_ni,
    }
