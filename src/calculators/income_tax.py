"""Income tax calculator — band-by-band breakdown."""

from typing import Any

from src.calculators.tax_data import UK_TAX_DATA, TaxYearData


def calculate_income_tax(
    taxable_income: float,
    data: TaxYearData = UK_TAX_DATA,
) -> dict[str, Any]:
    """Calculate UK income tax with per-band breakdown.

    Band edges are shifted down by the personal allowance, since
    taxable_income is already net of it (basic rate up to 37,700,
    higher rate up to 112,570, additional rate above).

    Args:
        taxable_income: Income after pension and personal allowance.
        data: Tax parameters to apply.

    Returns:
        Dict with total_tax and breakdown.
    """
    breakdown: list[dict[str, Any]] = []
    total_tax = 0.0
    lower = 0.0

    for band in data.bands:
        if taxable_income <= lower:
            break

        upper = band.upper - data.personal_allowance if band.upper is not None else None
        taxed = (min(taxable_income, upper) if upper is not None else taxable_income) - lower
        tax = taxed * band.rate

        breakdown.append({
            "lower": lower,
            "upper": upper,
            "rate": band.rate,
            "taxable_amount": taxed,
            "tax": tax,
        })
        total_tax += tax
        if upper is None:
            break
        lower = upper

    return {
        "taxable_income": taxable_income,
        "total_tax": total_tax,
        "breakdown": breakdown,
    }
