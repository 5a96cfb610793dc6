"""Tests for locale_utils.py - locale tag parsing with Babel.

Covers normalize_locale, LocaleInfo, resolve_locale and coerce_locale.
Includes property-based tests with Hypothesis for tag round-tripping.

Python 3.13+.
"""

from __future__ import annotations

import logging

import pytest
from babel import Locale
from hypothesis import event, given
from hypothesis import strategies as st

from istring.locale_utils import LocaleInfo, coerce_locale, normalize_locale, resolve_locale


class TestNormalizeLocale:
    """BCP-47 to POSIX conversion."""

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("en-US") == "en_US"

    def test_already_normalized(self) -> None:
        assert normalize_locale("en_US") == "en_US"

    def test_multiple_hyphens(self) -> None:
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    def test_surrounding_whitespace_stripped(self) -> None:
        assert normalize_locale(" de-AT ") == "de_AT"


class TestLocaleInfo:
    """Parsed tag value."""

    def test_spec(self) -> None:
        assert LocaleInfo("sr", territory="RS", script="Latn").spec == "sr-Latn-RS"
        assert LocaleInfo("en").spec == "en"
        assert str(LocaleInfo("de", territory="CH")) == "de-CH"

    def test_from_babel(self) -> None:
        info = LocaleInfo.from_babel(Locale.parse("zh_Hant_TW"))
        assert info == LocaleInfo("zh", territory="TW", script="Hant")

    def test_hashable(self) -> None:
        assert len({LocaleInfo("en"), LocaleInfo("en")}) == 1


class TestResolveLocale:
    """Tag parsing with fallback."""

    @pytest.mark.parametrize(
        ("tag", "spec", "language"),
        [
            ("en-US", "en-US", "en"),
            ("en_us", "en-US", "en"),
            ("EN", "en", "en"),
            ("sr-Latn-RS", "sr-Latn-RS", "sr"),
            ("de_DE.UTF-8", "de-DE", "de"),
            ("xx", "xx", "xx"),
        ],
    )
    def test_valid_tags(self, tag: str, spec: str, language: str) -> None:
        info = resolve_locale(tag)
        assert info.spec == spec
        assert info.language == language

    @pytest.mark.parametrize("tag", ["", "123", "en-US-x-private-use-too-long!"])
    def test_invalid_tags_fall_back(self, tag: str, caplog: pytest.LogCaptureFixture) -> None:
        resolve_locale.cache_clear()
        with caplog.at_level(logging.WARNING, logger="istring.locale_utils"):
            info = resolve_locale(tag)
        assert info.spec == "en-US"
        assert "Falling back to en-US" in caplog.text

    def test_fallback_warning_is_single_line_diagnostic(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        resolve_locale.cache_clear()
        with caplog.at_level(logging.WARNING, logger="istring.locale_utils"):
            resolve_locale("123")
        (message,) = caplog.messages
        assert message.startswith("LOCALE_INVALID: Invalid locale '123'")
        assert "\n" not in message

    def test_cached(self) -> None:
        assert resolve_locale("fr-FR") is resolve_locale("fr-FR")

    @given(
        st.sampled_from(["en", "de", "fr", "sr", "zh", "pt"]),
        st.sampled_from([None, "US", "DE", "BR", "RS"]),
        st.sampled_from([None, "Latn", "Hant"]),
    )
    def test_round_trip(self, language: str, territory: str | None, script: str | None) -> None:
        """Property: resolving a spec gives back the same LocaleInfo."""
        event(f"locale_parts={sum(p is not None for p in (territory, script))}")
        info = LocaleInfo(language, territory=territory, script=script)
        assert resolve_locale(info.spec) == info


class TestCoerceLocale:
    """Accepted locale representations."""

    def test_none_is_default(self) -> None:
        assert coerce_locale(None).spec == "en-US"

    def test_locale_info_passes_through(self) -> None:
        info = LocaleInfo("it")
        assert coerce_locale(info) is info

    def test_babel_locale(self) -> None:
        assert coerce_locale(Locale("pl", "PL")).spec == "pl-PL"

    def test_string(self) -> None:
        assert coerce_locale("ru_RU").language == "ru"
