"""
Calculator Constants

Thresholds, deductions, priorities and tier enums used by the calculators.
All values are deterministic and mirror the published Italian requirements
for the digital nomad visa and the 183-day tax residency rule.
"""

from enum import Enum
from typing import Dict


# =============================================================================
# STATUS TIERS
# =============================================================================

class EligibilityStatus(str, Enum):
    """Tier of a nomad visa eligibility score."""
    APPROVED = "APPROVED"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


class RiskStatus(str, Enum):
    """Tier of a tax residency risk score."""
    HIGH_RISK = "HIGH_RISK"
    MODERATE_RISK = "MODERATE_RISK"
    SAFE = "SAFE"


class AffiliateType(str, Enum):
    """Category of an upsell suggestion."""
    INSURANCE = "INSURANCE"
    BANKING = "BANKING"
    HOUSING = "HOUSING"
    LEGAL = "LEGAL"
    EDUCATION = "EDUCATION"
    CAREER = "CAREER"


# =============================================================================
# ELIGIBILITY SCORING
# =============================================================================

MAX_SCORE = 100
MIN_SCORE = 0

# Tier thresholds
APPROVED_THRESHOLD = 90   # score >= 90
CRITICAL_THRESHOLD = 60   # score < 60

# Point deductions per rule
DEDUCTIONS: Dict[str, int] = {
    "work_proof": 10,
    "qualification": 20,
    "remote_exp": 15,
    "contract_gap": 10,
    "income_low": 30,
    "per_dependant": 5,
    "bank_statements_6m": 10,
    "bank_statements_less": 20,
    "transitory": 15,
    "airbnb": 25,
    "insurance": 10,
    "passport": 5,
}

MIN_REMOTE_EXP_MONTHS = 6
MIN_PASSPORT_VALIDITY_MONTHS = 15

# Income threshold: base + spouse (first dependant) + each child after that
BASE_INCOME_EUR = 28000
SPOUSE_COST_EUR = 9360
CHILD_COST_EUR = 1560

# Higher number = higher priority
AFFILIATE_PRIORITY: Dict[AffiliateType, int] = {
    AffiliateType.LEGAL: 4,
    AffiliateType.BANKING: 3,
    AffiliateType.HOUSING: 3,
    AffiliateType.INSURANCE: 2,
    AffiliateType.EDUCATION: 1,
    AffiliateType.CAREER: 1,
}

# =============================================================================
# TAX RESIDENCY SCORING
# =============================================================================

BASE_RISK_SCORE = 50
MAX_RISK_SCORE = 100

DAYS_IN_YEAR = 365
TAX_RESIDENCY_DAYS = 183

# Zero-based month index (June) from which a late Anagrafe registration is risky
ANAGRAFE_RISK_MONTH_INDEX = 5

RISK_LOADINGS: Dict[str, int] = {
    "not_tax_resident": 30,
    "anagrafe": 20,
    "home_country": 40,
}

# Country specific loading, at most one applies
HOME_COUNTRY_RISK: Dict[str, int] = {
    "US": 15,   # citizenship based taxation
    "UK": 10,   # statutory residence test
    "CA": 10,   # factual residence
}

HOME_COUNTRY_FEEDBACK_KEYS: Dict[str, str] = {
    "US": "usRisk",
    "UK": "ukRisk",
    "CA": "caRisk",
}

HIGH_RISK_THRESHOLD = 70       # risk > 70
MODERATE_RISK_THRESHOLD = 40   # risk > 40
