"""
Tests for the nomad visa eligibility scorer.

Run from the project root:
    pytest calculators/tests/test_eligibility.py
"""

from calculators.logic import (
    NomadVisaForm,
    score_nomad_eligibility,
    required_income,
    calculate_nomad_eligibility,
)
from calculators.logic.eligibility import classify_score


def echo(key, params=None):
    """Stand-in translator that returns the message key."""
    return key


def make_form(**overrides) -> NomadVisaForm:
    """A profile that passes every rule; override fields to trigger them."""
    data = {
        "citizenship_non_eu": True,
        "work_status": "REMOTE_EMPLOYEE",
        "work_proof_available": True,
        "employer_location_outside_italy": True,
        "criminal_record_clean": True,
        "highest_qualification": "BACHELOR",
        "remote_exp_months": 12,
        "contract_duration_12m": True,
        "annual_gross_income_eur": 40000,
        "dependants_joining": 0,
        "income_documentation_12m": "12M",
        "accommodation_proof": "LEASE_12M",
        "health_insurance_min_30k": True,
        "passport_validity_months": 24,
    }
    data.update(overrides)
    return NomadVisaForm(**data)


def score(**overrides):
    return score_nomad_eligibility(make_form(**overrides), echo, echo)


# =============================================================================
# HARD GATES
# =============================================================================

def test_clean_profile_is_approved():
    result = score()
    assert result.score == 100
    assert result.status == "APPROVED"
    assert result.feedback == []
    assert result.affiliate_action is None


def test_eu_citizen_fails_immediately():
    result = score(citizenship_non_eu=False, work_proof_available=False)
    assert result.score == 0
    assert result.status == "CRITICAL"
    assert result.feedback == ["citizenship"]
    assert result.affiliate_action is None


def test_italian_employer_fails_immediately():
    result = score(employer_location_outside_italy=False, health_insurance_min_30k=False)
    assert result.score == 0
    assert result.status == "CRITICAL"
    assert result.feedback == ["employerLocation"]
    assert result.affiliate_action is None


def test_criminal_record_carries_legal_action():
    result = score(criminal_record_clean=False)
    assert result.score == 0
    assert result.status == "CRITICAL"
    assert result.feedback == ["criminalRecord"]
    assert result.affiliate_action.type == "LEGAL"
    assert result.affiliate_action.title == "legalTitle"
    assert result.affiliate_action.link.endswith("/legal")


def test_gates_checked_in_order():
    result = score(
        citizenship_non_eu=False,
        employer_location_outside_italy=False,
        criminal_record_clean=False,
    )
    assert result.feedback == ["citizenship"]

    result = score(employer_location_outside_italy=False, criminal_record_clean=False)
    assert result.feedback == ["employerLocation"]
    assert result.affiliate_action is None


# =============================================================================
# DEDUCTIONS
# =============================================================================

def test_missing_qualification_scenario():
    result = score(highest_qualification="NONE")
    assert result.score == 80
    assert result.status == "WARNING"
    assert result.feedback == ["qualification"]
    assert result.affiliate_action.type == "EDUCATION"


def test_each_rule_deducts_its_points():
    cases = [
        ({"work_proof_available": False}, 90, "workProof"),
        ({"remote_exp_months": 5}, 85, "remoteExp"),
        ({"contract_duration_12m": False}, 90, "contractGap"),
        ({"income_documentation_12m": "6M"}, 90, "bankStatements6m"),
        ({"income_documentation_12m": "LESS"}, 80, "bankStatementsLess"),
        ({"accommodation_proof": "TRANSITORY"}, 85, "transitory"),
        ({"accommodation_proof": "AIRBNB"}, 75, "airbnb"),
        ({"health_insurance_min_30k": False}, 90, "insurance"),
        ({"passport_validity_months": 14}, 95, "passport"),
    ]
    for overrides, expected_score, expected_key in cases:
        result = score(**overrides)
        assert result.score == expected_score, overrides
        assert result.feedback == [expected_key], overrides


def test_boundaries_do_not_deduct():
    result = score(remote_exp_months=6, passport_validity_months=15)
    assert result.score == 100


def test_passport_has_no_action():
    result = score(passport_validity_months=3)
    assert result.affiliate_action is None


def test_feedback_follows_rule_order():
    result = score(
        passport_validity_months=1,
        health_insurance_min_30k=False,
        highest_qualification="NONE",
        work_proof_available=False,
    )
    assert result.feedback == ["workProof", "qualification", "insurance", "passport"]


# =============================================================================
# INCOME
# =============================================================================

def test_required_income_by_dependants():
    assert required_income(0) == 28000
    assert required_income(1) == 37360
    assert required_income(2) == 38920
    assert required_income(3) == 40480


def test_income_equal_to_threshold_passes():
    assert score(annual_gross_income_eur=28000).score == 100
    assert score(annual_gross_income_eur=37360, dependants_joining=1).score == 100


def test_income_one_below_threshold_is_flagged():
    result = score(annual_gross_income_eur=27999)
    assert result.score == 70
    assert result.feedback == ["incomeLow"]
    assert result.affiliate_action.type == "BANKING"
    assert result.affiliate_action.title == "financeTitle"


def test_dependants_add_penalty_when_income_short():
    result = score(annual_gross_income_eur=30000, dependants_joining=2)
    assert result.score == 60
    assert result.status == "WARNING"
    assert result.feedback == ["incomeLow", "dependantsPenalty"]


def test_dependants_without_shortfall_cost_nothing():
    result = score(annual_gross_income_eur=50000, dependants_joining=4)
    assert result.score == 100


# =============================================================================
# AFFILIATE SELECTION
# =============================================================================

def test_legal_beats_everything():
    result = score(
        highest_qualification="NONE",
        health_insurance_min_30k=False,
        accommodation_proof="AIRBNB",
        contract_duration_12m=False,
    )
    assert result.affiliate_action.type == "LEGAL"
    assert result.affiliate_action.title == "contractDraftTitle"


def test_tie_keeps_first_triggered():
    result = score(work_proof_available=False, contract_duration_12m=False)
    assert result.affiliate_action.title == "contractReviewTitle"

    result = score(income_documentation_12m="LESS", accommodation_proof="AIRBNB")
    assert result.affiliate_action.type == "BANKING"
    assert result.affiliate_action.title == "docPrepTitle"

    result = score(highest_qualification="NONE", remote_exp_months=0)
    assert result.affiliate_action.type == "EDUCATION"


def test_insurance_beats_low_priority():
    result = score(highest_qualification="NONE", health_insurance_min_30k=False)
    assert result.affiliate_action.type == "INSURANCE"


def test_housing_beats_insurance():
    result = score(health_insurance_min_30k=False, accommodation_proof="AIRBNB")
    assert result.affiliate_action.type == "HOUSING"
    assert result.affiliate_action.link == "https://flatio.com"


# =============================================================================
# TIERS & CLAMPING
# =============================================================================

def test_tier_thresholds():
    assert classify_score(100) == "APPROVED"
    assert classify_score(90) == "APPROVED"
    assert classify_score(89) == "WARNING"
    assert classify_score(60) == "WARNING"
    assert classify_score(59) == "CRITICAL"
    assert classify_score(0) == "CRITICAL"


def test_sixty_is_warning():
    result = score(highest_qualification="NONE", accommodation_proof="TRANSITORY", passport_validity_months=1)
    assert result.score == 60
    assert result.status == "WARNING"


def test_score_is_clamped_at_zero():
    result = score(
        work_proof_available=False,
        highest_qualification="NONE",
        remote_exp_months=0,
        contract_duration_12m=False,
        annual_gross_income_eur=0,
        dependants_joining=5,
        income_documentation_12m="LESS",
        accommodation_proof="AIRBNB",
        health_insurance_min_30k=False,
        passport_validity_months=0,
    )
    assert result.score == 0
    assert result.status == "CRITICAL"
    assert len(result.feedback) == 10


def test_same_input_same_result():
    form = make_form(highest_qualification="NONE", accommodation_proof="AIRBNB")
    first = score_nomad_eligibility(form, echo, echo)
    second = score_nomad_eligibility(form, echo, echo)
    assert first == second


# =============================================================================
# LOCALISED TEXT
# =============================================================================

def test_income_message_is_interpolated():
    result = calculate_nomad_eligibility(
        make_form(annual_gross_income_eur=20000, dependants_joining=1),
        locale="en",
    )
    assert "20000" in result.feedback[0]
    assert "37360" in result.feedback[0]
    assert "1" in result.feedback[1]


def test_italian_feedback():
    result = calculate_nomad_eligibility(make_form(health_insurance_min_30k=False), locale="it")
    assert result.feedback == [
        "Serve un'assicurazione sanitaria valida in Italia con copertura di almeno €30.000."
    ]
    assert result.affiliate_action.button_text == "Richiedi un preventivo"
