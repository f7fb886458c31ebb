"""Tests for swot.analysis.engine."""

from swot.analysis.engine import CATEGORY_NARRATIVES, analyze
from swot.items.models import AnalysisSet, Category, Item, Priority


def _items(*priorities):
    return [Item(id=f"i{n}", text=f"item {n}", priority=p, created_at=n) for n, p in enumerate(priorities)]


class TestAnalyze:
    def test_empty_set(self):
        assert analyze(AnalysisSet()) == []

    def test_one_finding_per_item(self, sample_set):
        findings = analyze(sample_set)
        assert len(findings) == 4
        assert {f.item.id for f in findings} == {"s1", "w1", "o1", "t1"}

    def test_sorted_by_urgency(self):
        data = AnalysisSet(strengths=_items(Priority.LOW, Priority.CRITICAL, Priority.MEDIUM, Priority.HIGH))
        findings = analyze(data)
        assert [f.urgency for f in findings] == [5, 4, 3, 2]
        assert findings[0].item.priority == Priority.CRITICAL

    def test_ties_keep_category_then_insertion_order(self):
        data = AnalysisSet(
            strengths=[Item(id="s-a", text="a"), Item(id="s-b", text="b")],
            weaknesses=[Item(id="w-a", text="c")],
            opportunities=[Item(id="o-a", text="d", priority=Priority.HIGH)],
            threats=[Item(id="t-a", text="e"), Item(id="t-b", text="f")],
        )
        ids = [f.item.id for f in analyze(data)]
        assert ids == ["o-a", "s-a", "s-b", "w-a", "t-a", "t-b"]

    def test_narratives_come_from_category(self, sample_set):
        by_id = {f.item.id: f for f in analyze(sample_set)}
        threat = by_id["t1"]
        narrative = CATEGORY_NARRATIVES[Category.THREATS]
        assert threat.category == "Threat"
        assert threat.impact == narrative.impact
        assert threat.recommendation == narrative.recommendation
        assert by_id["s1"].category == "Strength"
        assert by_id["w1"].category == "Weakness"
        assert by_id["o1"].category == "Opportunity"

    def test_deterministic(self, sample_set):
        first = analyze(sample_set)
        second = analyze(sample_set)
        assert [f.model_dump() for f in first] == [f.model_dump() for f in second]

    def test_findings_do_not_alias_items(self, sample_set):
        finding = analyze(sample_set)[0]
        finding.item.text = "changed"
        assert all(i.text != "changed" for c in Category for i in sample_set.items(c))

    def test_urgency_is_never_one(self):
        data = AnalysisSet(threats=_items(*Priority))
        assert min(f.urgency for f in analyze(data)) == 2
