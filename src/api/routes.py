"""API routes for the salary calculators."""

import logging
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.calculators.pay_period import SalaryInput, convert_salary_period
from src.calculators.tax_data import TAX_YEAR
from src.calculators.uk_tax import UKSalaryInput, calculate_uk_tax
from src.forms import (
    CALCULATION_ERROR_MESSAGE,
    INVALID_AMOUNT_MESSAGE,
    field_bounds,
    initial_state,
    is_valid_amount,
    salary_breakdown,
    tax_breakdown,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _bounded(calculator: str, field: str, default: Any) -> Any:
    """Pydantic field constrained by the bounds in forms.yaml."""
    bounds = field_bounds(calculator, field)
    return Field(default, ge=bounds.get("min"), le=bounds.get("max"))


class SalaryRequest(BaseModel):
    """Request body for /salary/convert."""

    amount: float = _bounded("salary", "amount", ...)
    period: Literal["hourly", "daily", "weekly", "monthly", "annually"] = "annually"
    hours_per_day: float = _bounded("salary", "hours_per_day", 8)
    days_per_week: float = _bounded("salary", "days_per_week", 5)
    weeks_per_year: float = _bounded("salary", "weeks_per_year", 52)


class UKTaxRequest(BaseModel):
    """Request body for /uk-tax/calculate."""

    amount: float = _bounded("uk_tax", "amount", ...)
    period: Literal["monthly", "annually"] = "annually"
    is_scotland_resident: bool = False
    tax_code: str = "1257L"
    student_loan: bool = False
    bonus: float = _bounded("uk_tax", "bonus", 0)
    overtime: float = _bounded("uk_tax", "overtime", 0)
    taxable_benefits: float = _bounded("uk_tax", "taxable_benefits", 0)
    pension: float = _bounded("uk_tax", "pension", 0)


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "tax_year": TAX_YEAR}


@router.get("/salary/defaults")
async def salary_defaults() -> dict[str, Any]:
    """Initial values for the period converter form."""
    return initial_state("salary")


@router.get("/uk-tax/defaults")
async def uk_tax_defaults() -> dict[str, Any]:
    """Initial values for the UK take-home form."""
    return initial_state("uk_tax")


@router.post("/salary/convert")
async def convert_salary(body: SalaryRequest) -> JSONResponse:
    """Convert a salary amount into every pay period."""
    if not is_valid_amount(body.amount):
        return JSONResponse({"error": INVALID_AMOUNT_MESSAGE}, status_code=422)

    try:
        result = convert_salary_period(SalaryInput(**body.model_dump()))
        # Rendering rejects inf/nan, so it stays inside the try.
        return JSONResponse({
            "result": result._asdict(),
            "breakdown": salary_breakdown(result, body.period),
        })
    except Exception:
        logger.exception("Error converting salary period")
        return JSONResponse({"error": CALCULATION_ERROR_MESSAGE}, status_code=500)


@router.post("/uk-tax/calculate")
async def uk_tax(body: UKTaxRequest) -> JSONResponse:
    """Calculate UK take-home pay."""
    if not is_valid_amount(body.amount):
        return JSONResponse({"error": INVALID_AMOUNT_MESSAGE}, status_code=422)

    try:
        result = calculate_uk_tax(UKSalaryInput(**body.model_dump()))
        return JSONResponse({
            "result": result._asdict(),
            "breakdown": tax_breakdown(result),
            "tax_year": TAX_YEAR,
        })
    except Exception:
        logger.exception("Error calculating UK tax")
        return JSONResponse({"error": CALCULATION_ERROR_MESSAGE}, status_code=500)
