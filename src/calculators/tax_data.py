"""UK tax constants — income tax bands, National Insurance, student loan.

Hardcoded Python constants for a single tax year (2023-24, England &
Wales bands). Scottish bands and tax-code adjustments are not modelled.
"""

from typing import NamedTuple


class TaxBand(NamedTuple):
    """A single income tax band, expressed in gross-income terms."""

    upper: float | None  # None = no cap
    rate: float


class NationalInsurance(NamedTuple):
    """Employee Class 1 NI parameters."""

    primary_threshold: float
    upper_earnings_limit: float
    main_rate: float
    upper_rate: float


class StudentLoanThreshold(NamedTuple):
    """Student loan repayment parameters."""

    annual_threshold: float
    repayment_rate: float


class TaxYearData(NamedTuple):
    """All tax parameters for the modelled UK tax year."""

    personal_allowance: float
    bands: tuple[TaxBand, ...]
    national_insurance: NationalInsurance
    student_loan: StudentLoanThreshold


TAX_YEAR = "2023-24"

UK_TAX_DATA = TaxYearData(
    personal_allowance=12570,
    bands=(
        TaxBand(50270, 0.20),  # basic rate
        TaxBand(125140, 0.40),  # higher rate
        TaxBand(None, 0.45),  # additional rate
    ),
    national_insurance=NationalInsurance(
        primary_threshold=12570,
        upper_earnings_limit=50270,
        main_rate=0.12,
        upper_rate=0.02,
    ),
    student_loan=StudentLoanThreshold(
        annual_threshold=27295,
        repayment_rate=0.09,
    ),
)
