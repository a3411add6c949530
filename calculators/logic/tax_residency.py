"""
Tax Residency Risk Scorer

Estimates how risky a relocation year is from a tax residency standpoint.
Uses the 183-day presence heuristic on calendar days only; it does not model
treaty tie-breakers or split-year rules.
"""

import logging
from datetime import date
from typing import List

from ..i18n import Translator
from .affiliate import build_action
from .constants import (
    ANAGRAFE_RISK_MONTH_INDEX,
    BASE_RISK_SCORE,
    DAYS_IN_YEAR,
    HIGH_RISK_THRESHOLD,
    HOME_COUNTRY_FEEDBACK_KEYS,
    HOME_COUNTRY_RISK,
    MAX_RISK_SCORE,
    MODERATE_RISK_THRESHOLD,
    RISK_LOADINGS,
    TAX_RESIDENCY_DAYS,
    RiskStatus,
)
from .contracts import TaxCalculationResult, TaxResidencyForm

logger = logging.getLogger(__name__)


def days_in_italy(arrival: date, target_year: int) -> int:
    """
    Days physically present in Italy during the target year.

    Arrivals before the year count as a full 365 days, arrivals after it as 0.
    Otherwise counts from arrival through December 31, arrival day included.
    """
    start_of_year = date(target_year, 1, 1)
    end_of_year = date(target_year, 12, 31)

    if arrival > end_of_year:
        return 0
    if arrival < start_of_year:
        return DAYS_IN_YEAR
    return (end_of_year - arrival).days + 1


def classify_risk(risk_score: int) -> RiskStatus:
    if risk_score > HIGH_RISK_THRESHOLD:
        return RiskStatus.HIGH_RISK
    if risk_score > MODERATE_RISK_THRESHOLD:
        return RiskStatus.MODERATE_RISK
    return RiskStatus.SAFE


def score_tax_residency(
    form: TaxResidencyForm,
    t_feedback: Translator,
    t_affiliate: Translator
) -> TaxCalculationResult:
    """
    Score a validated tax residency form.

    Args:
        form: Validated residency profile
        t_feedback: Translator for feedback messages (key, params) -> text
        t_affiliate: Translator for the tax consultation card

    Returns:
        TaxCalculationResult; the tax consultation action is always attached
    """
    feedback: List[str] = []
    risk_score = BASE_RISK_SCORE

    days = days_in_italy(form.arrival_date, form.target_year)

    # 1. Italian 183-day requirement
    if days < TAX_RESIDENCY_DAYS:
        risk_score += RISK_LOADINGS["not_tax_resident"]
        feedback.append(t_feedback("notTaxResident", {"days": days}))
    else:
        feedback.append(t_feedback("isTaxResident", {"days": days}))

        # Late arrivals have no margin for Anagrafe registration delays
        if form.arrival_date.month - 1 >= ANAGRAFE_RISK_MONTH_INDEX:
            risk_score += RISK_LOADINGS["anagrafe"]
            feedback.append(t_feedback("anagrafeRisk"))

    # 2. Home country day budget
    days_outside = DAYS_IN_YEAR - days
    if days_outside > form.max_days_home:
        risk_score += RISK_LOADINGS["home_country"]
        feedback.append(t_feedback("homeCountryRisk", {
            "country": form.home_country,
            "limit": form.max_days_home,
            "potential": days_outside,
        }))

    # 3. Country specific loading
    country_key = HOME_COUNTRY_FEEDBACK_KEYS.get(form.home_country)
    if country_key:
        risk_score += HOME_COUNTRY_RISK[form.home_country]
        feedback.append(t_feedback(country_key))

    risk_score = min(MAX_RISK_SCORE, risk_score)
    status = classify_risk(risk_score)
    logger.debug(f"Tax residency scored {risk_score} ({status.value}), {days} days in Italy")

    return TaxCalculationResult(
        risk_score=risk_score,
        status=status,
        feedback=feedback,
        affiliate_action=build_action("tax_consult", t_affiliate),
        days_in_italy=days,
    )
