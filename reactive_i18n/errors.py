"""Locale errors raised by the store and the JSON loader."""

from pathlib import Path


class LocaleError(Exception):
    """Base class for locale acquisition errors."""


class LocaleFetchError(LocaleError):
    """The fetcher failed to produce a locale for a language switch."""

    def __init__(self, lang: str) -> None:
        super().__init__(f"Failed to fetch locale {lang!r}")
        self.lang = lang


class LocaleNotFoundError(LocaleError):
    def __init__(self, lang: str, path: Path) -> None:
        super().__init__(f"No locale file for {lang!r} at {path}")
        self.lang = lang
        self.path = path


class InvalidLocaleError(LocaleError):
    def __init__(self, lang: str, detail: str) -> None:
        super().__init__(f"Invalid locale {lang!r}: {detail}")
        self.lang = lang
        self.detail = detail
