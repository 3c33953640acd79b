"""Shared type aliases for locale data and translate functions."""

from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, Protocol, TypeAlias, Union

LocaleLang: TypeAlias = str

# A nested message tree: leaves are strings, branches are nested trees.
LocaleTree: TypeAlias = Mapping[str, Union[str, "LocaleTree"]]

LocaleTable: TypeAlias = Mapping[LocaleLang, LocaleTree]

FlatLocale: TypeAlias = dict[str, str]

# Keyed arguments (with an optional "@" modifier) or positional arguments.
TranslateArgs: TypeAlias = Mapping[str | int, Any] | Sequence[Any]

TranslateFunction: TypeAlias = Callable[..., str]


class LocaleFetcher(Protocol):
    def __call__(self, lang: LocaleLang) -> Awaitable[LocaleTree] | LocaleTree: ...


MODIFIER_ARG = "@"
