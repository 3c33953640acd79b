"""JSON file locale fetcher: ``<base_dir>/<lang>.json``."""

import asyncio
import json
import logging
from collections.abc import Mapping
from pathlib import Path

from reactive_i18n.config import Settings, settings as default_settings
from reactive_i18n.errors import InvalidLocaleError, LocaleNotFoundError
from reactive_i18n.models import LocaleLang, LocaleTree
from reactive_i18n.store import I18nStore

logger = logging.getLogger(__name__)


def _validate(lang: LocaleLang, tree: object, path: str = "") -> None:
    if not isinstance(tree, Mapping):
        raise InvalidLocaleError(lang, f"expected an object at {path or '<root>'}")
    for k, v in tree.items():
        key = f"{path}.{k}" if path else k
        if isinstance(v, Mapping):
            _validate(lang, v, key)
        elif not isinstance(v, str):
            raise InvalidLocaleError(lang, f"{key} must be a string or an object")


class JsonLocaleFetcher:
    """Load locale trees from JSON files in ``base_dir``."""

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = base_dir

    def path_for(self, lang: LocaleLang) -> Path:
        return self.base_dir / f"{lang}.json"

    def load(self, lang: LocaleLang) -> LocaleTree:
        path = self.path_for(lang)
        if not path.exists():
            raise LocaleNotFoundError(lang, path)
        with path.open("r", encoding="utf-8") as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise InvalidLocaleError(lang, str(exc)) from exc
        _validate(lang, payload)
        logger.debug("Loaded locale %s from %s", lang, path)
        return payload

    async def __call__(self, lang: LocaleLang) -> LocaleTree:
        return await asyncio.to_thread(self.load, lang)


async def preload_from_settings(settings: Settings | None = None) -> I18nStore:
    """Build a store preloaded with the configured default language."""
    settings = settings or default_settings
    fetcher = JsonLocaleFetcher(settings.locales_dir)
    return await I18nStore.preload(settings.default_language, fetcher)
