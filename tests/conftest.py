"""Shared locale fixtures."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from reactive_i18n.models import LocaleTable
from reactive_i18n.store import I18nStore


@pytest.fixture
def locales() -> LocaleTable:
    return {
        "en": {"apple": "apple", "person": {"name": "CRIMX"}},
        "zh": {"apple": "苹果", "person": {"name": "克里姆"}},
    }


@pytest.fixture
def i18n(locales: LocaleTable) -> Iterator[I18nStore]:
    store = I18nStore("en", locales)
    yield store
    store.dispose()


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    """Directory with en/zh JSON locale files."""
    (tmp_path / "en.json").write_text(
        json.dumps({"stock": {"fruit": "apple"}}), encoding="utf-8"
    )
    (tmp_path / "zh.json").write_text(
        json.dumps({"stock": {"fruit": "苹果"}}, ensure_ascii=False), encoding="utf-8"
    )
    return tmp_path
