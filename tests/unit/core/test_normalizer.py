"""Tests for lookup-key normalization."""

from __future__ import annotations

import pytest

from dnd_sheet.core.normalizer import normalize_for_lookup, normalize_many, same_key


class TestNormalizeForLookup:
    """Tests for normalize_for_lookup."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Stealth", "stealth"),
            ("  stealth ", "stealth"),
            ("STEALTH", "stealth"),
            ("Animal Handling", "animal handling"),
            ("", ""),
            ("   ", ""),
        ],
    )
    def test_trims_and_folds(self, raw: str, expected: str) -> None:
        assert normalize_for_lookup(raw) == expected

    def test_non_string_is_empty(self) -> None:
        assert normalize_for_lookup(None) == ""
        assert normalize_for_lookup(42) == ""

    def test_stable(self) -> None:
        """Test repeated calls give the same key."""
        assert normalize_for_lookup(" Thieves' Tools") == normalize_for_lookup(" Thieves' Tools")


class TestHelpers:
    """Tests for normalize_many and same_key."""

    def test_normalize_many_drops_blanks(self) -> None:
        assert normalize_many(["Arcana", " ", None, "HISTORY"]) == ["arcana", "history"]

    def test_normalize_many_none(self) -> None:
        assert normalize_many(None) == []

    def test_same_key(self) -> None:
        assert same_key("Wizard", " wizard ")
        assert not same_key("Wizard", "Sorcerer")

    def test_blank_never_matches(self) -> None:
        assert not same_key("", "")
        assert not same_key(None, None)
