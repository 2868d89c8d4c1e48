"""Shared test fixtures."""

import pytest

from src.calculators.uk_tax import UKSalaryInput


@pytest.fixture
def annual_30k() -> UKSalaryInput:
    """£30,000/yr with every optional input left at its default."""
    return UKSalaryInput(amount=30000, period="annually")
