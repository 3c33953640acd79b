"""Tests for the JSON locale fetcher."""

import json
import threading

import pytest

from reactive_i18n.config import Settings
from reactive_i18n.errors import InvalidLocaleError, LocaleError, LocaleNotFoundError
from reactive_i18n.locale.loader import JsonLocaleFetcher, preload_from_settings


class TestJsonLocaleFetcher:
    def test_load(self, locales_dir):
        fetcher = JsonLocaleFetcher(locales_dir)
        assert fetcher.load("en") == {"stock": {"fruit": "apple"}}

    async def test_async_call(self, locales_dir):
        fetcher = JsonLocaleFetcher(locales_dir)
        assert await fetcher("zh") == {"stock": {"fruit": "苹果"}}

    async def test_async_call_reads_off_event_loop(self, locales_dir):
        threads = []

        class RecordingFetcher(JsonLocaleFetcher):
            def load(self, lang):
                threads.append(threading.get_ident())
                return super().load(lang)

        await RecordingFetcher(locales_dir)("en")
        assert threads
        assert threads[0] != threading.get_ident()

    def test_missing_file(self, tmp_path):
        with pytest.raises(LocaleNotFoundError) as exc_info:
            JsonLocaleFetcher(tmp_path).load("fr")
        assert exc_info.value.path == tmp_path / "fr.json"
        assert isinstance(exc_info.value, LocaleError)

    def test_non_object_payload(self, tmp_path):
        (tmp_path / "en.json").write_text(json.dumps(["apple"]), encoding="utf-8")
        with pytest.raises(InvalidLocaleError):
            JsonLocaleFetcher(tmp_path).load("en")

    def test_non_string_leaf(self, tmp_path):
        (tmp_path / "en.json").write_text(
            json.dumps({"stock": {"count": 3}}), encoding="utf-8"
        )
        with pytest.raises(InvalidLocaleError) as exc_info:
            JsonLocaleFetcher(tmp_path).load("en")
        assert "stock.count" in exc_info.value.detail

    def test_broken_json(self, tmp_path):
        (tmp_path / "en.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidLocaleError):
            JsonLocaleFetcher(tmp_path).load("en")


class TestPreloadFromSettings:
    async def test_uses_configured_language(self, locales_dir):
        settings = Settings(default_language="zh", locales_dir=locales_dir)
        i18n = await preload_from_settings(settings)
        assert i18n.language == "zh"
        assert i18n.t("stock.fruit") == "苹果"
        await i18n.switch_lang("en")
        assert i18n.t("stock.fruit") == "apple"
        i18n.dispose()
