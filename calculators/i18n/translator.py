"""
Text lookup for the calculators.

A translator is a callable bound to one namespace of one locale:

    t = get_translator("CalculatorFeedback", "it")
    t("incomeLow", {"income": 20000, "threshold": 28000})

Scorers receive translators as arguments and never read the catalogues
directly, so tests can pass any function with the same shape.
"""

import logging
from typing import Any, Callable, Mapping, Optional

from ..config import DEFAULT_LOCALE
from .messages import CATALOGS

logger = logging.getLogger(__name__)

Translator = Callable[..., str]

SUPPORTED_LOCALES = tuple(CATALOGS.keys())


class _KeepMissing(dict):
    def __missing__(self, key):
        return "{" + key + "}"


def resolve_locale(locale: Optional[str]) -> str:
    """Map a requested locale (e.g. "it-IT") to a supported one."""
    if locale:
        base = locale.replace("_", "-").split("-")[0].lower()
        if base in CATALOGS:
            return base
    if DEFAULT_LOCALE in CATALOGS:
        return DEFAULT_LOCALE
    return "en"


class NamespaceTranslator:
    """Looks up keys in a single namespace and fills in placeholders."""

    def __init__(self, namespace: str, locale: Optional[str] = None):
        self.namespace = namespace
        self.locale = resolve_locale(locale)
        self.messages = CATALOGS[self.locale].get(namespace, {})

    def __call__(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        template = self.messages.get(key)
        if template is None:
            logger.warning(f"Missing message {self.namespace}.{key} for locale {self.locale}")
            return f"{self.namespace}.{key}"
        if not params:
            return template
        return template.format_map(_KeepMissing(params))


def get_translator(namespace: str, locale: Optional[str] = None) -> Translator:
    return NamespaceTranslator(namespace, locale)
