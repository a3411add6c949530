"""
Calculator Logic Module

Provides the deterministic scorers behind the site's visa and tax tools.
"""

from .contracts import (
    NomadVisaForm,
    TaxResidencyForm,
    CalculationResult,
    TaxCalculationResult,
    AffiliateAction,
    WorkStatus,
    Qualification,
    IncomeDocumentation,
    AccommodationProof,
    HomeCountry,
    PrimaryGoal,
)
from .constants import AffiliateType, EligibilityStatus, RiskStatus
from .eligibility import score_nomad_eligibility, required_income
from .tax_residency import score_tax_residency, days_in_italy
from .engine import CalculatorEngine, calculate_nomad_eligibility, calculate_tax_residency

__all__ = [
    # Main engine
    "CalculatorEngine",
    "calculate_nomad_eligibility",
    "calculate_tax_residency",

    # Scorers
    "score_nomad_eligibility",
    "score_tax_residency",
    "required_income",
    "days_in_italy",

    # Contracts
    "NomadVisaForm",
    "TaxResidencyForm",
    "CalculationResult",
    "TaxCalculationResult",
    "AffiliateAction",

    # Enums
    "WorkStatus",
    "Qualification",
    "IncomeDocumentation",
    "AccommodationProof",
    "HomeCountry",
    "PrimaryGoal",
    "AffiliateType",
    "EligibilityStatus",
    "RiskStatus",
]
