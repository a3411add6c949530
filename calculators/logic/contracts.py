"""
Data Contracts for the Calculators

Defines Pydantic models for the form inputs (NomadVisaForm, TaxResidencyForm)
and the calculator results. Input models do the validation the front end's
form schemas do, so a scorer only ever sees well-typed, in-range values.
"""

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field
from enum import Enum

from .constants import AffiliateType, EligibilityStatus, RiskStatus


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class WorkStatus(str, Enum):
    REMOTE_EMPLOYEE = "REMOTE_EMPLOYEE"
    FREELANCER = "FREELANCER"
    ENTREPRENEUR = "ENTREPRENEUR"


class Qualification(str, Enum):
    """Highest qualification accepted for the highly skilled worker route."""
    BACHELOR = "BACHELOR"
    EXP_5Y = "EXP_5Y"      # 5 years of relevant professional experience
    ICT_3Y = "ICT_3Y"      # 3 years of ICT experience
    NONE = "NONE"


class IncomeDocumentation(str, Enum):
    TWELVE_MONTHS = "12M"
    SIX_MONTHS = "6M"
    LESS = "LESS"


class AccommodationProof(str, Enum):
    LEASE_12M = "LEASE_12M"
    TRANSITORY = "TRANSITORY"
    AIRBNB = "AIRBNB"       # short-term rental


class HomeCountry(str, Enum):
    US = "US"
    UK = "UK"
    CA = "CA"
    OTHER = "OTHER"


class PrimaryGoal(str, Enum):
    TAX_SAVINGS = "TAX_SAVINGS"
    LIFESTYLE = "LIFESTYLE"
    FAMILY = "FAMILY"
    OTHER = "OTHER"


class NomadVisaForm(BaseModel):
    """
    Input contract for the nomad visa eligibility calculator.
    Yes/no selects arrive as "true"/"false" strings and are coerced to bool.
    """
    # 1. Eligibility & Status
    citizenship_non_eu: bool
    work_status: WorkStatus
    work_proof_available: bool
    employer_location_outside_italy: bool
    criminal_record_clean: bool

    # 2. Qualification & Experience
    highest_qualification: Qualification
    remote_exp_months: float = Field(ge=0)
    contract_duration_12m: bool

    # 3. Financial Requirements
    annual_gross_income_eur: float = Field(ge=0)
    dependants_joining: int = Field(default=0, ge=0)
    income_documentation_12m: IncomeDocumentation

    # 4. Accommodation & Insurance
    accommodation_proof: AccommodationProof
    health_insurance_min_30k: bool
    passport_validity_months: float = Field(ge=0)

    class Config:
        use_enum_values = True


class TaxResidencyForm(BaseModel):
    """Input contract for the tax residency risk calculator."""
    # 1. Goal Setting
    primary_goal: PrimaryGoal = PrimaryGoal.OTHER
    target_year: int = Field(ge=2025)
    arrival_date: date

    # 2. Home Country Confrontation
    home_country: HomeCountry
    max_days_home: int = Field(ge=0)

    class Config:
        use_enum_values = True


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class AffiliateAction(BaseModel):
    """Upsell suggestion rendered as a call-to-action card."""
    type: Optional[AffiliateType] = None
    title: str
    description: str
    link: str
    button_text: str

    class Config:
        use_enum_values = True


class CalculationResult(BaseModel):
    """Output of the nomad visa eligibility calculator."""
    score: int = Field(ge=0, le=100)
    status: EligibilityStatus
    feedback: List[str] = Field(default_factory=list)
    affiliate_action: Optional[AffiliateAction] = None

    class Config:
        use_enum_values = True


class TaxCalculationResult(BaseModel):
    """Output of the tax residency calculator. Higher risk_score is riskier."""
    risk_score: int = Field(ge=0, le=100)
    status: RiskStatus
    feedback: List[str] = Field(default_factory=list)
    affiliate_action: AffiliateAction
    days_in_italy: int = 0

    class Config:
        use_enum_values = True
