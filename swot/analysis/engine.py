"""Analysis engine — turn every SWOT item into a finding ranked by urgency."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import NamedTuple

from opentelemetry import trace

from swot.analysis.models import Finding
from swot.items.models import PRIORITY_URGENCY, AnalysisSet, Category

logger = logging.getLogger("swot.analysis")
tracer = trace.get_tracer(__name__)


class Narrative(NamedTuple):
    label: str
    impact: str
    recommendation: str


CATEGORY_NARRATIVES = MappingProxyType({
    Category.STRENGTHS: Narrative(
        label="Strength",
        impact="Boosts competitiveness and market differentiation",
        recommendation="Maximize this strength through strategic investment and effective communication",
    ),
    Category.WEAKNESSES: Narrative(
        label="Weakness",
        impact="Reduces operational efficiency and competitiveness",
        recommendation="Develop an immediate action plan to mitigate this weakness",
    ),
    Category.OPPORTUNITIES: Narrative(
        label="Opportunity",
        impact="Potential for growth and market expansion",
        recommendation="Assess feasibility and develop a strategy to seize it",
    ),
    Category.THREATS: Narrative(
        label="Threat",
        impact="Risk of market loss and revenue reduction",
        recommendation="Implement preventive measures and contingency plans",
    ),
})


def analyze(data: AnalysisSet) -> list[Finding]:
    """Return one finding per item, most urgent first.

    The sort is stable, so equal urgencies keep category order
    (strengths, weaknesses, opportunities, threats) then insertion order.
    """
    with tracer.start_as_current_span("swot-analyze") as span:
        findings = []
        for category in Category:
            narrative = CATEGORY_NARRATIVES[category]
            for item in data.items(category):
                findings.append(Finding(
                    category=narrative.label,
                    item=item.model_copy(deep=True),
                    impact=narrative.impact,
                    recommendation=narrative.recommendation,
                    urgency=PRIORITY_URGENCY[item.priority],
                ))

        findings = sorted(findings, key=lambda f: f.urgency, reverse=True)
        span.set_attribute("swot.findings", len(findings))
        logger.info("Analysis generated: %d findings", len(findings))
        return findings
