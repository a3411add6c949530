"""
Calculator Engine

Binds the scorers to a locale's message catalogues.
This is the primary entry point used by the API routes.
"""

from typing import Optional

from ..i18n import get_translator, resolve_locale
from .contracts import (
    CalculationResult,
    NomadVisaForm,
    TaxCalculationResult,
    TaxResidencyForm,
)
from .eligibility import score_nomad_eligibility
from .tax_residency import score_tax_residency


class CalculatorEngine:
    """
    Runs the calculators for one locale.

    Holds only translators, so a single instance can serve any number of
    requests concurrently.
    """

    def __init__(self, locale: Optional[str] = None):
        """
        Args:
            locale: Requested locale; unsupported values fall back to the default.
        """
        self.locale = resolve_locale(locale)
        self.version = "1.0.0"

        self.t_feedback = get_translator("CalculatorFeedback", self.locale)
        self.t_affiliate = get_translator("AffiliateActions", self.locale)
        self.t_tax_feedback = get_translator("TaxFeedback", self.locale)
        self.t_tax_affiliate = get_translator("TaxAffiliate", self.locale)

    def nomad_visa(self, form: NomadVisaForm) -> CalculationResult:
        return score_nomad_eligibility(form, self.t_feedback, self.t_affiliate)

    def tax_residency(self, form: TaxResidencyForm) -> TaxCalculationResult:
        return score_tax_residency(form, self.t_tax_feedback, self.t_tax_affiliate)

    def nomad_visa_from_dict(self, form_data: dict) -> CalculationResult:
        """
        Validate a raw form payload and score it.

        Raises:
            pydantic.ValidationError: if the payload does not match NomadVisaForm
        """
        return self.nomad_visa(NomadVisaForm(**form_data))

    def tax_residency_from_dict(self, form_data: dict) -> TaxCalculationResult:
        """
        Validate a raw form payload and score it.

        Raises:
            pydantic.ValidationError: if the payload does not match TaxResidencyForm
        """
        return self.tax_residency(TaxResidencyForm(**form_data))


# Convenience functions for simple usage
def calculate_nomad_eligibility(
    form: NomadVisaForm,
    locale: Optional[str] = None
) -> CalculationResult:
    return CalculatorEngine(locale).nomad_visa(form)


def calculate_tax_residency(
    form: TaxResidencyForm,
    locale: Optional[str] = None
) -> TaxCalculationResult:
    return CalculatorEngine(locale).tax_residency(form)
