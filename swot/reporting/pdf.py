"""PDF report — SWOT data section plus the optional prioritized analysis."""

from __future__ import annotations

import logging
from datetime import datetime

from opentelemetry import trace

from swot.analysis.models import Finding
from swot.config import settings
from swot.errors import ExportError
from swot.items.models import CATEGORY_TITLES, PRIORITY_COLORS, PRIORITY_LABELS, AnalysisSet, Item
from swot.reporting.writer import DocumentWriter

logger = logging.getLogger("swot.reporting")
tracer = trace.get_tracer(__name__)

PDF_EXPORT_FILENAME = "analise-swot-completa.pdf"

# Layout, in millimetres.
MARGIN_X = 20
INDENT_X = 25
TOP_Y = 20
RIGHT_X = 190
ITEM_WRAP_WIDTH = 170
FINDING_WRAP_WIDTH = 165
PAGE_BREAK_Y = 270
FINDING_BREAK_Y = 240
TEXT_LINE_STEP = 5
DIVIDER_COLOR = (200 / 255, 200 / 255, 200 / 255)


def _item_line(index: int, item: Item) -> str:
    responsible = f" - Responsible: {item.responsible}" if item.responsible else ""
    return f"{index}. {item.text} ({PRIORITY_LABELS[item.priority]}){responsible}"


def _render_title(writer: DocumentWriter, generated_at: datetime) -> float:
    y = TOP_Y
    writer.set_font_size(20)
    writer.text("Complete SWOT Analysis", MARGIN_X, y)
    y += 15

    writer.set_font_size(10)
    writer.text(f"Generated on: {generated_at.strftime(settings.report_date_format)}", MARGIN_X, y)
    return y + 20


def _render_data_section(writer: DocumentWriter, data: AnalysisSet, y: float) -> float:
    writer.set_font_size(18)
    writer.text("1. SWOT Data", MARGIN_X, y)
    y += 15

    for category, title in CATEGORY_TITLES.items():
        items = data.items(category)
        if not items:
            continue

        if y > PAGE_BREAK_Y:
            writer.add_page()
            y = TOP_Y

        writer.set_font_size(16)
        writer.text(title, MARGIN_X, y)
        y += 10

        for index, item in enumerate(items, start=1):
            writer.set_font_size(12)
            lines = writer.split_text_to_size(_item_line(index, item), ITEM_WRAP_WIDTH)
            writer.dot(INDENT_X - 2, y - 1.2, 0.8, PRIORITY_COLORS[item.priority])
            writer.text(lines, INDENT_X, y)
            y += len(lines) * TEXT_LINE_STEP + 5

            if y > PAGE_BREAK_Y:
                writer.add_page()
                y = TOP_Y
        y += 10
    return y


def _render_analysis_section(writer: DocumentWriter, findings: list[Finding]) -> None:
    writer.add_page()
    y = TOP_Y

    writer.set_font_size(18)
    writer.text("2. Strategic Analysis", MARGIN_X, y)
    y += 15

    writer.set_font_size(12)
    writer.text("Results prioritized by criticality:", MARGIN_X, y)
    y += 15

    for index, finding in enumerate(findings, start=1):
        if y > FINDING_BREAK_Y:
            writer.add_page()
            y = TOP_Y

        item = finding.item
        writer.set_font_size(14)
        heading = writer.split_text_to_size(f"{index}. {finding.category}: {item.text}", ITEM_WRAP_WIDTH)
        writer.text(heading, MARGIN_X, y)
        y += 8 + (len(heading) - 1) * TEXT_LINE_STEP

        writer.set_font_size(10)
        writer.text(f"Priority: {PRIORITY_LABELS[item.priority]}", INDENT_X, y)
        y += 5

        if item.responsible:
            writer.text(f"Responsible: {item.responsible}", INDENT_X, y)
            y += 5

        writer.set_font_size(11)
        impact = writer.split_text_to_size(f"Impact: {finding.impact}", FINDING_WRAP_WIDTH)
        writer.text(impact, INDENT_X, y)
        y += len(impact) * TEXT_LINE_STEP + 3

        recommendation = writer.split_text_to_size(
            f"Recommendation: {finding.recommendation}", FINDING_WRAP_WIDTH
        )
        writer.text(recommendation, INDENT_X, y)
        y += len(recommendation) * TEXT_LINE_STEP + 8

        writer.line(MARGIN_X, y, RIGHT_X, y, color=DIVIDER_COLOR)
        y += 8


def render_pdf(
    data: AnalysisSet,
    findings: list[Finding] | None = None,
    generated_at: datetime | None = None,
    writer: DocumentWriter | None = None,
) -> bytes:
    """Build the full report and return the PDF bytes.

    The analysis section is included only when ``findings`` is non-empty and
    keeps the order it was given in. Any failure while drawing is raised as
    ExportError. A ``writer`` passed in stays open; one created here is
    closed before returning, on success or failure.
    """
    generated_at = generated_at or datetime.now()

    with tracer.start_as_current_span("swot-export-pdf") as span:
        owns_writer = writer is None
        try:
            if owns_writer:
                writer = DocumentWriter()
            y = _render_title(writer, generated_at)
            _render_data_section(writer, data, y)
            if findings:
                _render_analysis_section(writer, findings)
            span.set_attribute("swot.pages", writer.page_count)
            content = writer.to_bytes()
            logger.info("PDF report built: %d pages, %d bytes", writer.page_count, len(content))
        except Exception as exc:
            logger.exception("Failed to build PDF report")
            raise ExportError("Error exporting PDF. Check that there is data to export.") from exc
        finally:
            if owns_writer and writer is not None:
                writer.close()
        return content
