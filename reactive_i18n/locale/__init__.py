"""Locale flattening, message templates and key resolution."""

from reactive_i18n.locale.flatten import flatten_locale
from reactive_i18n.locale.resolver import TemplateCache, create_resolver, resolve
from reactive_i18n.locale.template import CompiledTemplate, compile_template, stringify

__all__ = [
    "CompiledTemplate",
    "TemplateCache",
    "compile_template",
    "create_resolver",
    "flatten_locale",
    "resolve",
    "stringify",
]
