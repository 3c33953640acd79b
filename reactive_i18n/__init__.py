"""Reactive translation lookup for nested locale trees."""

from reactive_i18n.errors import (
    InvalidLocaleError,
    LocaleError,
    LocaleFetchError,
    LocaleNotFoundError,
)
from reactive_i18n.locale import compile_template, flatten_locale
from reactive_i18n.locale.loader import JsonLocaleFetcher, preload_from_settings
from reactive_i18n.store import I18nStore, Translator

__all__ = [
    "I18nStore",
    "InvalidLocaleError",
    "JsonLocaleFetcher",
    "LocaleError",
    "LocaleFetchError",
    "LocaleNotFoundError",
    "Translator",
    "compile_template",
    "flatten_locale",
    "preload_from_settings",
]
