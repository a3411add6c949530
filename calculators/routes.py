"""
Calculator API Routes

Exposes the visa eligibility and tax residency calculators via REST API.
"""

import logging
from typing import Optional, Dict, Any
from fastapi import APIRouter, HTTPException, Header
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .logic.contracts import AffiliateAction, CalculationResult, TaxCalculationResult
from .logic.engine import CalculatorEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculators", tags=["calculators"])


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class CalculatorRequest(BaseModel):
    """Request body shared by both calculator endpoints."""
    form: Dict[str, Any] = Field(
        ...,
        description="Form values as submitted by the tool page",
    )
    locale: Optional[str] = Field(
        default=None,
        description="Locale for feedback text (en, it). Falls back to Accept-Language."
    )


def _engine_for(request: CalculatorRequest, accept_language: Optional[str]) -> CalculatorEngine:
    locale = request.locale
    if not locale and accept_language:
        locale = accept_language.split(",")[0].strip()
    return CalculatorEngine(locale)


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/nomad-visa", summary="Score digital nomad visa eligibility")
def nomad_visa(
    request: CalculatorRequest,
    accept_language: Optional[str] = Header(default=None)
):
    """
    Score a digital nomad visa application.

    **Response:**
    - `score` 0-100 and `status` APPROVED / WARNING / CRITICAL
    - `feedback` lines in rule order
    - `affiliate_action` with the single most relevant next step, or null
    """
    try:
        engine = _engine_for(request, accept_language)
        try:
            result = engine.nomad_visa_from_dict(request.form)
        except ValidationError as e:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid nomad visa form: {str(e)}"
            )

        logger.info(f"Nomad visa calculation: score={result.score} status={result.status}")
        return _serialize_eligibility(result, engine.locale)

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Nomad visa calculation failed")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


@router.post("/tax-residency", summary="Score tax residency risk")
def tax_residency(
    request: CalculatorRequest,
    accept_language: Optional[str] = Header(default=None)
):
    """
    Score the tax residency risk of a relocation year.

    **Response:**
    - `risk_score` 0-100 (higher is riskier) and `status` SAFE / MODERATE_RISK / HIGH_RISK
    - `days_in_italy` computed for the target year
    - `feedback` lines and the tax consultation `affiliate_action`
    """
    try:
        engine = _engine_for(request, accept_language)
        try:
            result = engine.tax_residency_from_dict(request.form)
        except ValidationError as e:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid tax residency form: {str(e)}"
            )

        logger.info(f"Tax residency calculation: risk={result.risk_score} status={result.status}")
        return _serialize_tax(result, engine.locale)

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Tax residency calculation failed")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


def _serialize_action(action: Optional[AffiliateAction]) -> Optional[Dict[str, Any]]:
    if action is None:
        return None
    return {
        "type": action.type,
        "title": action.title,
        "description": action.description,
        "link": action.link,
        "button_text": action.button_text,
    }


def _serialize_eligibility(result: CalculationResult, locale: str) -> Dict[str, Any]:
    return {
        "score": result.score,
        "status": result.status,
        "feedback": result.feedback,
        "affiliate_action": _serialize_action(result.affiliate_action),
        "locale": locale,
    }


def _serialize_tax(result: TaxCalculationResult, locale: str) -> Dict[str, Any]:
    return {
        "risk_score": result.risk_score,
        "status": result.status,
        "days_in_italy": result.days_in_italy,
        "feedback": result.feedback,
        "affiliate_action": _serialize_action(result.affiliate_action),
        "locale": locale,
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Calculator health check")
def health_check():
    """Check if the calculators are operational."""
    return {"status": "ok", "engine": "calculators", "version": "1.0.0"}
