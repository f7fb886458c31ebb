"""Tests for swot.items.models."""

import operator
import re

import pytest

from swot.items.models import (
    CATEGORY_TITLES,
    PRIORITY_COLORS,
    PRIORITY_LABELS,
    PRIORITY_URGENCY,
    AnalysisSet,
    Category,
    Item,
    Priority,
    generate_item_id,
)


class TestPriority:
    def test_ordered_by_severity(self):
        assert Priority.LOW < Priority.MEDIUM < Priority.HIGH < Priority.CRITICAL
        assert max(Priority) == Priority.CRITICAL
        assert sorted([Priority.CRITICAL, Priority.LOW, Priority.HIGH]) == [
            Priority.LOW,
            Priority.HIGH,
            Priority.CRITICAL,
        ]

    @pytest.mark.parametrize("op", [operator.lt, operator.le, operator.gt, operator.ge])
    def test_ordering_against_plain_strings_is_refused(self, op):
        with pytest.raises(TypeError):
            op(Priority.HIGH, "low")
        with pytest.raises(TypeError):
            op("low", Priority.HIGH)

    def test_equality_matches_wire_value(self):
        assert Priority.HIGH == "high"
        assert Priority("critical") is Priority.CRITICAL

    def test_wire_values(self):
        assert [p.value for p in Priority] == ["low", "medium", "high", "critical"]

    def test_lookup_tables_cover_every_priority(self):
        for table in (PRIORITY_LABELS, PRIORITY_COLORS, PRIORITY_URGENCY):
            assert set(table) == set(Priority)

    def test_urgency_mapping(self):
        assert dict(PRIORITY_URGENCY) == {
            Priority.CRITICAL: 5,
            Priority.HIGH: 4,
            Priority.MEDIUM: 3,
            Priority.LOW: 2,
        }


class TestCategory:
    def test_fixed_order(self):
        assert [c.value for c in Category] == ["strengths", "weaknesses", "opportunities", "threats"]
        assert list(CATEGORY_TITLES.values()) == ["Strengths", "Weaknesses", "Opportunities", "Threats"]


class TestItem:
    def test_defaults(self):
        item = Item(text="Brand")
        assert item.priority == Priority.MEDIUM
        assert item.responsible == ""
        assert isinstance(item.created_at, int)
        assert item.id

    def test_generated_ids_are_unique(self):
        ids = {generate_item_id() for _ in range(500)}
        assert len(ids) == 500
        assert all(re.fullmatch(r"\d+-[a-z0-9]{7}", i) for i in ids)

    def test_dump_uses_wire_names(self):
        dumped = Item(id="a", text="x", created_at=5).model_dump(mode="json", by_alias=True)
        assert dumped == {"id": "a", "text": "x", "priority": "medium", "responsible": "", "createdAt": 5}


class TestAnalysisSet:
    def test_empty_has_all_categories(self):
        data = AnalysisSet()
        assert data.counts() == {"strengths": 0, "weaknesses": 0, "opportunities": 0, "threats": 0}
        assert data.is_empty()

    def test_instances_do_not_share_lists(self):
        a, b = AnalysisSet(), AnalysisSet()
        a.strengths.append(Item(text="x"))
        assert b.strengths == []

    def test_counts(self, sample_set):
        assert sample_set.total_items() == 4
        assert sample_set.items(Category.THREATS)[0].id == "t1"
        assert sample_set.items("weaknesses")[0].id == "w1"
