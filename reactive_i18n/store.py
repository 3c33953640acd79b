"""Reactive i18n store: current language, loaded locales and ``t``."""

import inspect
import logging
import operator
from types import MappingProxyType
from typing import Any

from reactive_i18n.errors import LocaleFetchError
from reactive_i18n.locale.flatten import flatten_locale
from reactive_i18n.locale.resolver import create_resolver
from reactive_i18n.models import (
    FlatLocale,
    LocaleFetcher,
    LocaleLang,
    LocaleTable,
    LocaleTree,
    TranslateArgs,
    TranslateFunction,
)
from reactive_i18n.reactivity import Computed, Readable, Writable

logger = logging.getLogger(__name__)

EMPTY_LOCALE: LocaleTree = MappingProxyType({})


class Translator:
    """Stable translate function delegating to the currently derived resolver.

    Hold on to ``store.t`` freely: the object never changes, only the
    resolver it reads on each call does.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Readable[TranslateFunction]) -> None:
        self._source = source

    def __call__(self, key_path: str, args: TranslateArgs | None = None) -> str:
        return self._source.get()(key_path, args)


class I18nStore:
    """Resolve translated messages for the current language.

    Usage::

        i18n = I18nStore("en", {"en": {"intro": "{{name}} eats {{fruit}}"}})
        i18n.t("intro", {"name": "CRIMX", "fruit": "apple"})  # "CRIMX eats apple"
        await i18n.switch_lang("zh")
    """

    @classmethod
    async def preload(cls, initial_lang: LocaleLang, fetcher: LocaleFetcher) -> "I18nStore":
        """Fetch the locale of ``initial_lang`` and build a store with it."""
        tree = await _fetch(fetcher, initial_lang)
        return cls(initial_lang, {initial_lang: tree}, fetcher=fetcher)

    def __init__(
        self,
        initial_lang: LocaleLang,
        locales: LocaleTable,
        fetcher: LocaleFetcher | None = None,
    ) -> None:
        self.fetcher = fetcher

        self.table_writable: Writable[LocaleTable] = Writable(locales)
        self._language: Writable[LocaleLang] = Writable(initial_lang, equal=operator.eq)
        self.language_readable: Readable[LocaleLang] = self._language

        self.locale_readable: Readable[LocaleTree] = Computed(
            lambda get: get(self.table_writable).get(get(self._language), EMPTY_LOCALE)
        )
        self._flat_locale: Readable[FlatLocale] = Computed(
            lambda get: flatten_locale(get(self.locale_readable))
        )
        # A new flat locale gets a resolver with a new, empty template cache.
        self.t_readable: Readable[TranslateFunction] = Computed(
            lambda get: create_resolver(get(self._flat_locale))
        )

        self.t = Translator(self.t_readable)

    @property
    def language(self) -> LocaleLang:
        return self._language.get()

    @property
    def locale(self) -> LocaleTree:
        return self.locale_readable.get()

    @property
    def table(self) -> LocaleTable:
        return self.table_writable.get()

    async def switch_lang(self, lang: LocaleLang) -> None:
        """Change language, fetching its locale first if it is not loaded.

        Raises:
            LocaleFetchError: the fetcher failed; the language is unchanged.
        """
        if lang not in self.table and self.fetcher is not None:
            try:
                tree = await _fetch(self.fetcher, lang)
            except Exception as exc:
                logger.exception("Failed to fetch locale %s", lang)
                raise LocaleFetchError(lang) from exc
            self.add_locale(lang, tree)
        logger.info("Switching language %s -> %s", self.language, lang)
        self._language.set(lang)

    def has_key(self, key: str) -> bool:
        """Check whether ``key`` has a message in the current language."""
        return key in self._flat_locale.get()

    def add_locale(self, lang: LocaleLang, locale: LocaleTree) -> None:
        """Add or replace the locale of ``lang``.

        Use ``table_writable.set()`` for more control.
        """
        logger.debug("Installing locale %s", lang)
        self.table_writable.set({**self.table, lang: locale})

    def dispose(self) -> None:
        for node in (
            self.t_readable,
            self._flat_locale,
            self.locale_readable,
            self._language,
            self.table_writable,
        ):
            node.dispose()


async def _fetch(fetcher: LocaleFetcher, lang: LocaleLang) -> LocaleTree:
    logger.debug("Fetching locale %s", lang)
    result: Any = fetcher(lang)
    if inspect.isawaitable(result):
        result = await result
    return result
