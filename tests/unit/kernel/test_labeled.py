"""Unit tests for LabeledEntity cloning and ordering."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from dp_kernel.kernel.ddd import LabeledEntity, sort_for_display
from dp_kernel.kernel.i18n import Label, LabelSet
from dp_kernel.testing.strategies import group_strategy, locale_strategy


class Category(LabeledEntity):
    """Minimal subclass used to check that clones keep their concrete type."""


def _entity(name: str = "sales", order: int = 2) -> LabeledEntity:
    return LabeledEntity(
        name,
        order=order,
        labels=LabelSet(Label("Sales", {"de": "Vertrieb"}), Label("Figures", {"de": "Zahlen"})),
    )


# ---------------------------------------------------------------------------
# clone
# ---------------------------------------------------------------------------


class TestClone:
    def test_copies_name_and_order(self) -> None:
        clone = _entity().clone("de")
        assert clone.name == "sales"
        assert clone.order == 2

    def test_labels_are_frozen_for_locale(self) -> None:
        clone = _entity().clone("de")
        assert clone.name_label == Label("Vertrieb")
        assert clone.labels.resolve_name("fr") == "Vertrieb"
        assert clone.labels.resolve_desc(None) == "Zahlen"

    def test_keeps_concrete_type(self) -> None:
        clone = Category("c", order=1).clone(None)
        assert type(clone) is Category

    def test_clone_is_isolated_from_source(self) -> None:
        source = _entity()
        clone = source.clone("de")
        clone.name_label.put("de", "changed")  # type: ignore[union-attr]
        clone.name_label.default = "changed"  # type: ignore[union-attr]
        clone.desc_label = None
        clone.order = 99
        assert source.name_label == Label("Sales", {"de": "Vertrieb"})
        assert source.desc_label == Label("Figures", {"de": "Zahlen"})
        assert source.order == 2

    def test_source_mutation_does_not_leak_into_clone(self) -> None:
        source = _entity()
        clone = source.clone("de")
        source.name_label.put("de", "Verkauf")  # type: ignore[union-attr]
        assert clone.labels.resolve_name("de") == "Vertrieb"

    def test_entity_without_labels(self) -> None:
        clone = LabeledEntity("plain").clone("fr")
        assert clone.name_label is None
        assert clone.labels.resolve_name("fr") == ""

    @given(group_strategy(), locale_strategy(), locale_strategy())
    def test_mutating_clone_never_changes_source(self, group, locale: str, other: str) -> None:
        before = group.labels.copy()
        clone = group.clone(locale)
        if clone.name_label is not None:
            clone.name_label.put(other, "mutated")
            clone.name_label.default = "mutated"
        assert group.labels == before


# ---------------------------------------------------------------------------
# clone_all
# ---------------------------------------------------------------------------


class TestCloneAll:
    def test_none_in_none_out(self) -> None:
        assert LabeledEntity.clone_all(None, "de") is None

    def test_empty_in_empty_out(self) -> None:
        assert LabeledEntity.clone_all([], "de") == []

    def test_preserves_order_and_length(self) -> None:
        source = [_entity("c", 3), _entity("a", 1), _entity("b", 2)]
        clones = LabeledEntity.clone_all(source, "de")
        assert clones is not None
        assert [c.name for c in clones] == ["c", "a", "b"]
        assert all(c is not s for c, s in zip(clones, source))

    def test_returns_new_list(self) -> None:
        source = [_entity()]
        assert LabeledEntity.clone_all(source, None) is not source

    @given(st.lists(group_strategy(), max_size=8), locale_strategy())
    def test_names_line_up(self, groups, locale: str) -> None:
        clones = LabeledEntity.clone_all(groups, locale)
        assert clones is not None
        assert len(clones) == len(groups)
        for i, clone in enumerate(clones):
            assert clone.name == groups[i].name
            assert clone.order == groups[i].order


# ---------------------------------------------------------------------------
# ordering
# ---------------------------------------------------------------------------


class TestOrdering:
    def test_default_order_is_zero(self) -> None:
        assert LabeledEntity("x").order == 0

    def test_sort_by_order_then_name(self) -> None:
        entities = [_entity("b", 1), _entity("z", 0), _entity("a", 1)]
        assert [e.name for e in sort_for_display(entities)] == ["z", "a", "b"]

    def test_sort_key_tolerates_missing_name(self) -> None:
        assert LabeledEntity(None, order=3).sort_key == (3, "")

    def test_repr_mentions_fields(self) -> None:
        r = repr(_entity())
        assert "sales" in r
        assert "order=2" in r
