"""Flatten nested locale trees into dotted key paths."""

from collections.abc import Mapping

from reactive_i18n.models import FlatLocale, LocaleTree


def flatten_locale(tree: LocaleTree, prefix: str = "") -> FlatLocale:
    """Flatten nested locale: {'a': {'b': 'c'}} -> {'a.b': 'c'}.

    Only string leaves are emitted; other scalar values are skipped.
    """
    items: FlatLocale = {}
    for k, v in tree.items():
        key = f"{prefix}.{k}" if prefix else k
        if isinstance(v, str):
            items[key] = v
        elif isinstance(v, Mapping):
            items.update(flatten_locale(v, key))
    return items
