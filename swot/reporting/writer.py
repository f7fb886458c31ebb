"""Document writer — a small jsPDF-like drawing surface on top of PyMuPDF.

Coordinates are millimetres from the top-left corner of an A4 page; text is
placed by baseline. Fonts are the PDF base-14 Helvetica.
"""

from __future__ import annotations

import fitz  # PyMuPDF

MM = 72 / 25.4
LINE_HEIGHT_FACTOR = 1.15
DEFAULT_FONT = "helv"


class DocumentWriter:
    """Accumulates pages in memory; nothing is written until ``to_bytes``."""

    def __init__(self, paper: str = "a4") -> None:
        self._width_pt, self._height_pt = fitz.paper_size(paper)
        self._doc = fitz.open()
        self._page = self._doc.new_page(width=self._width_pt, height=self._height_pt)
        self._font_size = 12.0
        self._text_color: tuple[float, float, float] = (0, 0, 0)

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    @property
    def page_height(self) -> float:
        return self._height_pt / MM

    @property
    def font_size(self) -> float:
        return self._font_size

    def set_font_size(self, size: float) -> None:
        self._font_size = float(size)

    def set_text_color(self, rgb: tuple[float, float, float]) -> None:
        self._text_color = rgb

    def add_page(self) -> None:
        self._page = self._doc.new_page(width=self._width_pt, height=self._height_pt)

    def text_width(self, text: str) -> float:
        """Rendered width of ``text`` in millimetres at the current font size."""
        return fitz.get_text_length(text, fontname=DEFAULT_FONT, fontsize=self._font_size) / MM

    def line_height(self) -> float:
        return self._font_size * LINE_HEIGHT_FACTOR / MM

    def split_text_to_size(self, text: str, max_width: float) -> list[str]:
        """Word-wrap ``text`` so that no line is wider than ``max_width`` mm.

        Explicit newlines are kept; a single word wider than the limit is
        broken across lines.
        """
        lines: list[str] = []
        for paragraph in text.split("\n"):
            current = ""
            for word in paragraph.split():
                candidate = f"{current} {word}" if current else word
                if self.text_width(candidate) <= max_width:
                    current = candidate
                    continue
                if current:
                    lines.append(current)
                while len(word) > 1 and self.text_width(word) > max_width:
                    cut = self._fitting_prefix(word, max_width)
                    lines.append(word[:cut])
                    word = word[cut:]
                current = word
            lines.append(current)
        return lines

    def _fitting_prefix(self, word: str, max_width: float) -> int:
        cut = 1
        while cut < len(word) and self.text_width(word[: cut + 1]) <= max_width:
            cut += 1
        return cut

    def text(self, text: str | list[str], x: float, y: float) -> None:
        """Place one line, or several lines stacked by line height, with the first baseline at ``y``."""
        lines = [text] if isinstance(text, str) else text
        step = self.line_height()
        for i, line in enumerate(lines):
            if not line:
                continue
            self._page.insert_text(
                fitz.Point(x * MM, (y + i * step) * MM),
                line,
                fontsize=self._font_size,
                fontname=DEFAULT_FONT,
                color=self._text_color,
            )

    def line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: tuple[float, float, float] = (0, 0, 0),
        width: float = 0.5,
    ) -> None:
        self._page.draw_line(
            fitz.Point(x1 * MM, y1 * MM),
            fitz.Point(x2 * MM, y2 * MM),
            color=color,
            width=width,
        )

    def dot(self, x: float, y: float, radius: float, color: tuple[float, float, float]) -> None:
        self._page.draw_circle(fitz.Point(x * MM, y * MM), radius * MM, color=color, fill=color)

    def to_bytes(self) -> bytes:
        return self._doc.tobytes(garbage=3, deflate=True)

    def close(self) -> None:
        self._doc.close()
