"""Key resolution: modifier selection, template cache, fallbacks."""

import logging
from collections.abc import Mapping
from functools import partial

from reactive_i18n.locale.template import CompiledTemplate, compile_template, stringify
from reactive_i18n.models import MODIFIER_ARG, FlatLocale, TranslateArgs, TranslateFunction

logger = logging.getLogger(__name__)


class TemplateCache:
    """Compiled templates for exactly one flat locale."""

    def __init__(self, flat_locale: FlatLocale) -> None:
        self.flat_locale = flat_locale
        self._templates: dict[str, CompiledTemplate] = {}

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, key: str) -> bool:
        return key in self._templates

    def template(self, key: str) -> CompiledTemplate:
        """Get the compiled template for ``key``, compiling on first use."""
        fn = self._templates.get(key)
        if fn is None:
            logger.debug("Compiling template for %s", key)
            fn = self._templates[key] = compile_template(self.flat_locale[key])
        return fn


def modifier_key(key_path: str, modifier: object) -> str:
    return f"{key_path}{MODIFIER_ARG}{stringify(modifier)}"


def resolve(cache: TemplateCache, key_path: str, args: TranslateArgs | None = None) -> str:
    """Translate ``key_path`` against the cache's flat locale.

    Unknown keys return the key path itself. Without ``args`` the raw
    message is returned and no interpolation happens.
    """
    flat_locale = cache.flat_locale
    if args is not None:
        key = key_path
        if isinstance(args, Mapping):
            modifier = args.get(MODIFIER_ARG)
            if modifier is not None:
                candidate = modifier_key(key_path, modifier)
                if candidate in flat_locale:
                    key = candidate
        if key in flat_locale:
            return cache.template(key)(args)
    return flat_locale.get(key_path, key_path)


def create_resolver(flat_locale: FlatLocale) -> TranslateFunction:
    """Bind a fresh, empty template cache to ``flat_locale``."""
    return partial(resolve, TemplateCache(flat_locale))
