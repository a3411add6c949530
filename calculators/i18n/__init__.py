# Localised text lookup used by the calculators
from .translator import (
    Translator,
    NamespaceTranslator,
    SUPPORTED_LOCALES,
    get_translator,
    resolve_locale,
)

__all__ = [
    "Translator",
    "NamespaceTranslator",
    "SUPPORTED_LOCALES",
    "get_translator",
    "resolve_locale",
]
