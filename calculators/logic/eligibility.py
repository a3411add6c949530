"""
Nomad Visa Eligibility Scorer

Scores a digital nomad visa application from 0 to 100.
Hard gates short-circuit to a zero score; every other rule deducts points,
adds a feedback line and may suggest an affiliate action.
All logic is deterministic - the scorer has no state and does no I/O.
"""

import logging
from typing import List, Optional, Union

from ..i18n import Translator
from .affiliate import AffiliateCandidate, build_action, candidate, select_action
from .constants import (
    APPROVED_THRESHOLD,
    BASE_INCOME_EUR,
    CHILD_COST_EUR,
    CRITICAL_THRESHOLD,
    DEDUCTIONS,
    MAX_SCORE,
    MIN_PASSPORT_VALIDITY_MONTHS,
    MIN_REMOTE_EXP_MONTHS,
    MIN_SCORE,
    SPOUSE_COST_EUR,
    EligibilityStatus,
)
from .contracts import (
    AccommodationProof,
    AffiliateAction,
    CalculationResult,
    IncomeDocumentation,
    NomadVisaForm,
    Qualification,
)

logger = logging.getLogger(__name__)


def required_income(dependants: int) -> int:
    """
    Minimum annual gross income for the applicant plus dependants.

    The first dependant is counted as a spouse, the rest as children.
    """
    income = BASE_INCOME_EUR
    if dependants > 0:
        income += SPOUSE_COST_EUR
        if dependants > 1:
            income += (dependants - 1) * CHILD_COST_EUR
    return income


def classify_score(score: int) -> EligibilityStatus:
    if score >= APPROVED_THRESHOLD:
        return EligibilityStatus.APPROVED
    if score < CRITICAL_THRESHOLD:
        return EligibilityStatus.CRITICAL
    return EligibilityStatus.WARNING


def _gate_failure(
    message: str,
    action: Optional[AffiliateAction] = None
) -> CalculationResult:
    return CalculationResult(
        score=MIN_SCORE,
        status=EligibilityStatus.CRITICAL,
        feedback=[message],
        affiliate_action=action,
    )


def _amount(value: Union[int, float]) -> Union[int, float]:
    # 40000.0 renders as 40000 in feedback text
    return int(value) if float(value).is_integer() else value


def score_nomad_eligibility(
    form: NomadVisaForm,
    t_feedback: Translator,
    t_affiliate: Translator
) -> CalculationResult:
    """
    Score a validated nomad visa form.

    Args:
        form: Validated application profile
        t_feedback: Translator for feedback messages (key, params) -> text
        t_affiliate: Translator for affiliate card text

    Returns:
        CalculationResult with score, tier, ordered feedback and at most
        one affiliate action
    """
    # --- 1. HARD GATES ---

    if not form.citizenship_non_eu:
        return _gate_failure(t_feedback("citizenship"))

    if not form.employer_location_outside_italy:
        return _gate_failure(t_feedback("employerLocation"))

    if not form.criminal_record_clean:
        return _gate_failure(
            t_feedback("criminalRecord"),
            build_action("legal_consult", t_affiliate),
        )

    score = MAX_SCORE
    feedback: List[str] = []
    candidates: List[AffiliateCandidate] = []

    # --- 2. STATUS PROOF ---

    if not form.work_proof_available:
        score -= DEDUCTIONS["work_proof"]
        feedback.append(t_feedback("workProof"))
        candidates.append(candidate("contract_review", t_affiliate))

    # --- 3. QUALIFICATION & EXPERIENCE ---

    if form.highest_qualification == Qualification.NONE:
        score -= DEDUCTIONS["qualification"]
        feedback.append(t_feedback("qualification"))
        candidates.append(candidate("qualification_check", t_affiliate))

    if form.remote_exp_months < MIN_REMOTE_EXP_MONTHS:
        score -= DEDUCTIONS["remote_exp"]
        feedback.append(t_feedback("remoteExp"))
        candidates.append(candidate("cv_help", t_affiliate))

    if not form.contract_duration_12m:
        score -= DEDUCTIONS["contract_gap"]
        feedback.append(t_feedback("contractGap"))
        candidates.append(candidate("contract_draft", t_affiliate))

    # --- 4. FINANCIAL REQUIREMENTS ---

    threshold = required_income(form.dependants_joining)
    if form.annual_gross_income_eur < threshold:
        score -= DEDUCTIONS["income_low"]
        feedback.append(t_feedback("incomeLow", {
            "income": _amount(form.annual_gross_income_eur),
            "threshold": threshold,
        }))

        if form.dependants_joining > 0:
            score -= DEDUCTIONS["per_dependant"] * form.dependants_joining
            feedback.append(t_feedback("dependantsPenalty", {"count": form.dependants_joining}))

        candidates.append(candidate("finance", t_affiliate))

    if form.income_documentation_12m == IncomeDocumentation.SIX_MONTHS:
        score -= DEDUCTIONS["bank_statements_6m"]
        feedback.append(t_feedback("bankStatements6m"))
    elif form.income_documentation_12m == IncomeDocumentation.LESS:
        score -= DEDUCTIONS["bank_statements_less"]
        feedback.append(t_feedback("bankStatementsLess"))
        candidates.append(candidate("doc_prep", t_affiliate))

    # --- 5. ACCOMMODATION & INSURANCE ---

    if form.accommodation_proof == AccommodationProof.TRANSITORY:
        score -= DEDUCTIONS["transitory"]
        feedback.append(t_feedback("transitory"))
    elif form.accommodation_proof == AccommodationProof.AIRBNB:
        score -= DEDUCTIONS["airbnb"]
        feedback.append(t_feedback("airbnb"))
        candidates.append(candidate("housing", t_affiliate))

    if not form.health_insurance_min_30k:
        score -= DEDUCTIONS["insurance"]
        feedback.append(t_feedback("insurance"))
        candidates.append(candidate("insurance", t_affiliate))

    if form.passport_validity_months < MIN_PASSPORT_VALIDITY_MONTHS:
        score -= DEDUCTIONS["passport"]
        feedback.append(t_feedback("passport"))

    score = max(MIN_SCORE, score)
    status = classify_score(score)
    logger.debug(f"Nomad eligibility scored {score} ({status.value}) with {len(feedback)} flags")

    return CalculationResult(
        score=score,
        status=status,
        feedback=feedback,
        affiliate_action=select_action(candidates),
    )
