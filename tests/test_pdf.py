"""Tests for the PDF report and the document writer."""

from datetime import datetime
from unittest.mock import MagicMock, patch

import fitz
import pytest

from swot.analysis.engine import analyze
from swot.errors import ExportError
from swot.items.models import AnalysisSet, Item, Priority
from swot.reporting.pdf import PDF_EXPORT_FILENAME, render_pdf
from swot.reporting.writer import DocumentWriter


def _open(content: bytes):
    return fitz.open(stream=content, filetype="pdf")


def _text(content: bytes) -> str:
    with _open(content) as doc:
        return "\n".join(page.get_text() for page in doc)


class TestDocumentWriter:
    def test_wraps_to_width(self):
        writer = DocumentWriter()
        writer.set_font_size(12)
        lines = writer.split_text_to_size("word " * 80, 170)
        assert len(lines) > 1
        assert all(writer.text_width(line) <= 170 for line in lines)

    def test_breaks_long_words(self):
        writer = DocumentWriter()
        lines = writer.split_text_to_size("x" * 400, 50)
        assert "".join(lines) == "x" * 400
        assert all(writer.text_width(line) <= 50 for line in lines)

    def test_keeps_explicit_newlines(self):
        writer = DocumentWriter()
        assert writer.split_text_to_size("a\nb", 170) == ["a", "b"]

    def test_a4_pages(self):
        writer = DocumentWriter()
        writer.add_page()
        assert writer.page_count == 2
        assert round(writer.page_height) == 297


class TestRenderPdf:
    def test_filename(self):
        assert PDF_EXPORT_FILENAME == "analise-swot-completa.pdf"

    def test_data_section(self, sample_set):
        content = render_pdf(sample_set, generated_at=datetime(2026, 10, 19))
        assert content.startswith(b"%PDF")
        text = _text(content)
        assert "Complete SWOT Analysis" in text
        assert "Generated on: 19/10/2026" in text
        assert "1. Loyal customers (High) - Responsible: Ana" in text
        assert "1. Slow delivery (Critical)" in text
        assert "Strategic Analysis" not in text

    def test_skips_empty_categories(self):
        data = AnalysisSet(threats=[Item(text="Price war")])
        text = _text(render_pdf(data))
        assert "Threats" in text
        assert "Strengths" not in text

    def test_analysis_section_on_new_page(self, sample_set):
        content = render_pdf(sample_set, analyze(sample_set))
        with _open(content) as doc:
            assert doc.page_count == 2
            second = doc[1].get_text()
        assert "2. Strategic Analysis" in second
        assert "1. Weakness: Slow delivery" in second
        assert "Impact: Reduces operational efficiency" in second
        assert "Responsible: Ana" in second
        assert second.index("Weakness: Slow delivery") < second.index("Strength: Loyal customers")

    def test_long_analysis_continues_across_pages(self):
        data = AnalysisSet(
            strengths=[Item(text=f"Strength {n}", priority=Priority.HIGH, responsible="Ana") for n in range(10)],
            threats=[Item(text=f"Threat {n}", priority=Priority.CRITICAL) for n in range(10)],
        )
        content = render_pdf(data, analyze(data))
        with _open(content) as doc:
            pages = [page.get_text() for page in doc]
        start = next(i for i, text in enumerate(pages) if "2. Strategic Analysis" in text)
        analysis_pages = pages[start:]
        assert len(analysis_pages) >= 3
        assert "1. Threat: Threat 0" in analysis_pages[0]
        assert "20. Strength: Strength 9" in analysis_pages[-1]
        assert all("Strategic Analysis" not in text for text in analysis_pages[1:])
        for text in analysis_pages[1:]:
            assert "Recommendation:" in text

    def test_paginates_long_data(self):
        data = AnalysisSet(strengths=[Item(text=f"Strength number {n}", priority=Priority.LOW) for n in range(120)])
        with _open(render_pdf(data)) as doc:
            assert doc.page_count > 2

    def test_empty_set_still_renders(self):
        assert render_pdf(AnalysisSet()).startswith(b"%PDF")

    def test_writer_failure_raises_export_error(self, sample_set, caplog):
        writer = MagicMock()
        writer.split_text_to_size.side_effect = RuntimeError("font missing")
        with pytest.raises(ExportError):
            render_pdf(sample_set, writer=writer)
        assert "Failed to build PDF report" in caplog.text
        writer.to_bytes.assert_not_called()
        writer.close.assert_not_called()

    def test_caller_writer_stays_open(self, sample_set):
        writer = DocumentWriter()
        try:
            content = render_pdf(sample_set, analyze(sample_set), writer=writer)
            assert writer.page_count == 2
            assert content.startswith(b"%PDF")
            writer.add_page()
            assert writer.page_count == 3
        finally:
            writer.close()

    def test_owned_writer_closed_on_failure(self, sample_set):
        writer = MagicMock()
        writer.split_text_to_size.side_effect = RuntimeError("font missing")
        with patch("swot.reporting.pdf.DocumentWriter", return_value=writer):
            with pytest.raises(ExportError):
                render_pdf(sample_set)
        writer.close.assert_called_once()
