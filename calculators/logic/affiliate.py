"""
Affiliate Actions

Builds the upsell cards attached to calculator results and picks the single
card to show when several rules suggest one.
"""

from functools import reduce
from typing import Dict, Iterable, NamedTuple, Optional, Tuple

from ..config import AFFILIATE_BASE_URL
from ..i18n import Translator
from .constants import AFFILIATE_PRIORITY, AffiliateType
from .contracts import AffiliateAction


# action id -> (type, message key prefix, link)
AFFILIATE_CATALOG: Dict[str, Tuple[Optional[AffiliateType], str, str]] = {
    "legal_consult": (AffiliateType.LEGAL, "legal", f"{AFFILIATE_BASE_URL}/legal"),
    "contract_review": (AffiliateType.LEGAL, "contractReview", f"{AFFILIATE_BASE_URL}/legal-contract"),
    "contract_draft": (AffiliateType.LEGAL, "contractDraft", f"{AFFILIATE_BASE_URL}/legal-contract"),
    "qualification_check": (AffiliateType.EDUCATION, "qualCheck", f"{AFFILIATE_BASE_URL}/cimea"),
    "cv_help": (AffiliateType.CAREER, "cvHelp", f"{AFFILIATE_BASE_URL}/career"),
    "finance": (AffiliateType.BANKING, "finance", f"{AFFILIATE_BASE_URL}/accountant"),
    "doc_prep": (AffiliateType.BANKING, "docPrep", f"{AFFILIATE_BASE_URL}/docs"),
    "housing": (AffiliateType.HOUSING, "housing", "https://flatio.com"),
    "insurance": (AffiliateType.INSURANCE, "insurance", "https://safetywing.com"),
    "tax_consult": (None, "taxConsult", f"{AFFILIATE_BASE_URL}/tax-consult"),
}


class AffiliateCandidate(NamedTuple):
    """An action suggested by one rule, with the priority it competes at."""
    priority: int
    action: AffiliateAction


def build_action(action_id: str, t_affiliate: Translator) -> AffiliateAction:
    """Render a catalogued action through the affiliate translator."""
    action_type, prefix, link = AFFILIATE_CATALOG[action_id]
    return AffiliateAction(
        type=action_type,
        title=t_affiliate(f"{prefix}Title"),
        description=t_affiliate(f"{prefix}Desc"),
        link=link,
        button_text=t_affiliate(f"{prefix}Btn"),
    )


def candidate(action_id: str, t_affiliate: Translator) -> AffiliateCandidate:
    action = build_action(action_id, t_affiliate)
    return AffiliateCandidate(AFFILIATE_PRIORITY[AffiliateType(action.type)], action)


def _keep_higher(
    best: Optional[AffiliateCandidate],
    challenger: AffiliateCandidate
) -> Optional[AffiliateCandidate]:
    # Only a strictly higher priority replaces the current pick
    if best is None or challenger.priority > best.priority:
        return challenger
    return best


def select_action(candidates: Iterable[AffiliateCandidate]) -> Optional[AffiliateAction]:
    """
    Pick the highest-priority action from rule-ordered candidates.

    Ties keep the earliest candidate. Returns None when no rule suggested one.
    """
    winner = reduce(_keep_higher, candidates, None)
    return winner.action if winner else None
