"""Unit tests for localized labels."""

from __future__ import annotations

import pytest
from hypothesis import given

from dp_kernel.kernel.errors import ValidationError
from dp_kernel.kernel.i18n import Label, LabelSet, normalize_locale, resolve
from dp_kernel.testing.strategies import label_set_strategy, label_strategy, locale_strategy


# ---------------------------------------------------------------------------
# normalize_locale
# ---------------------------------------------------------------------------


class TestNormalizeLocale:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("fr", "fr"),
            ("FR", "fr"),
            ("fr_fr", "fr-FR"),
            ("fr-FR", "fr-FR"),
            ("zh_hans_cn", "zh-Hans-CN"),
            ("es-419", "es-419"),
            ("  en_us ", "en-US"),
        ],
    )
    def test_canonical_form(self, raw: str, expected: str) -> None:
        assert normalize_locale(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "_-"])
    def test_blank_is_none(self, raw: str | None) -> None:
        assert normalize_locale(raw) is None


# ---------------------------------------------------------------------------
# Label
# ---------------------------------------------------------------------------


class TestLabel:
    def test_exact_match_wins(self) -> None:
        label = Label("Sales", {"de": "Vertrieb"})
        assert label.resolve("de") == "Vertrieb"

    def test_locale_spelling_is_irrelevant(self) -> None:
        label = Label("Sales", {"pt_br": "Vendas"})
        assert label.resolve("pt-BR") == "Vendas"
        assert label.locales == ("pt-BR",)

    def test_falls_back_to_default(self) -> None:
        label = Label("Sales", {"de": "Vertrieb"})
        assert label.resolve("fr") == "Sales"

    def test_no_language_only_fallback(self) -> None:
        label = Label("Sales", {"de": "Vertrieb"})
        assert label.resolve("de-AT") == "Sales"

    def test_falls_back_to_empty(self) -> None:
        assert Label().resolve("fr") == ""
        assert Label(None, {"de": "x"}).resolve(None) == ""

    def test_none_locale_uses_default(self) -> None:
        assert Label("Sales", {"de": "Vertrieb"}).resolve(None) == "Sales"

    def test_put_and_get(self) -> None:
        label = Label("Sales")
        label.put("fr_FR", "Ventes")
        assert label.get("fr-fr") == "Ventes"
        assert label.get("fr") is None
        assert label.is_localized()

    def test_put_rejects_blank_locale(self) -> None:
        with pytest.raises(ValidationError):
            Label().put("  ", "x")

    def test_values_view_is_read_only(self) -> None:
        label = Label("Sales", {"de": "Vertrieb"})
        with pytest.raises(TypeError):
            label.values["fr"] = "Ventes"  # type: ignore[index]

    def test_copy_is_independent(self) -> None:
        label = Label("Sales", {"de": "Vertrieb"})
        copied = label.copy()
        copied.put("de", "Verkauf")
        copied.default = "Revenue"
        assert label.resolve("de") == "Vertrieb"
        assert label.default == "Sales"

    def test_dict_round_trip(self) -> None:
        label = Label("Sales", {"de": "Vertrieb"})
        assert Label.from_dict(label.to_dict()) == label

    @pytest.mark.parametrize(
        "doc",
        [
            {"default": "Sales", "values": [["de", "Vertrieb"]]},
            {"default": "Sales", "values": {"de": 5}},
            {"default": 5},
        ],
    )
    def test_from_dict_rejects_malformed_document(self, doc: dict) -> None:
        with pytest.raises(ValidationError):
            Label.from_dict(doc)

    def test_equality(self) -> None:
        assert Label("a", {"de": "b"}) == Label("a", {"DE": "b"})
        assert Label("a") != Label("b")

    @given(label_strategy(), locale_strategy())
    def test_resolve_never_fails(self, label: Label, locale: str) -> None:
        text = label.resolve(locale)
        assert isinstance(text, str)
        if label.get(locale) is None:
            assert text == (label.default or "")


class TestResolveFunction:
    def test_absent_label(self) -> None:
        assert resolve(None, "fr") == ""

    def test_delegates(self) -> None:
        assert resolve(Label("Sales", {"fr": "Ventes"}), "fr") == "Ventes"


# ---------------------------------------------------------------------------
# LabelSet
# ---------------------------------------------------------------------------


class TestLabelSet:
    def _labels(self) -> LabelSet:
        return LabelSet(
            name_label=Label("Sales", {"de": "Vertrieb"}),
            desc_label=Label("Sales figures", {"de": "Verkaufszahlen"}),
        )

    def test_resolve_name_and_desc(self) -> None:
        labels = self._labels()
        assert labels.resolve_name("de") == "Vertrieb"
        assert labels.resolve_desc("de") == "Verkaufszahlen"
        assert labels.resolve_name("fr") == "Sales"

    def test_empty_set_resolves_empty(self) -> None:
        assert LabelSet().resolve_name("de") == ""
        assert LabelSet().resolve_desc(None) == ""

    def test_concrete_into_freezes_locale(self) -> None:
        source = self._labels()
        target = LabelSet()
        source.concrete_into(target, "de")
        assert target.name_label == Label("Vertrieb")
        assert target.desc_label == Label("Verkaufszahlen")
        assert not target.name_label.is_localized()

    def test_concrete_into_leaves_source_untouched(self) -> None:
        source = self._labels()
        before = source.copy()
        source.concrete_into(LabelSet(), "de")
        assert source == before

    def test_concrete_keeps_absent_labels_absent(self) -> None:
        source = LabelSet(name_label=Label("Sales"))
        target = LabelSet(desc_label=Label("stale"))
        source.concrete_into(target, "fr")
        assert target.name_label == Label("Sales")
        assert target.desc_label is None

    def test_concrete_returns_new_set(self) -> None:
        frozen = self._labels().concrete("de")
        assert frozen.resolve_name("fr") == "Vertrieb"

    def test_from_source_copies_locale_maps(self) -> None:
        source = self._labels()
        copied = LabelSet.from_source(source)
        assert copied == source
        copied.name_label.put("de", "Verkauf")  # type: ignore[union-attr]
        assert source.resolve_name("de") == "Vertrieb"

    @given(label_set_strategy(), locale_strategy())
    def test_concrete_matches_resolution(self, labels: LabelSet, locale: str) -> None:
        frozen = labels.concrete(locale)
        assert frozen.resolve_name(None) == labels.resolve_name(locale)
        assert frozen.resolve_desc("xx") == labels.resolve_desc(locale)
