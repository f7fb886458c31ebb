"""Session — the single owner of the SWOT data set and the displayed analysis."""

from __future__ import annotations

import logging

from swot.analysis.engine import analyze
from swot.analysis.models import Finding
from swot.errors import InvalidItemError
from swot.ingestion.importer import parse_import
from swot.ingestion.normalizer import normalize
from swot.items.models import AnalysisSet, Category, Item, Priority
from swot.storage.repository import Repository

logger = logging.getLogger("swot.session")


class Session:
    """Holds the AnalysisSet for one user and persists it after every mutation.

    Persistence is best-effort: a failed save is logged by the repository and
    the in-memory change stands.
    """

    def __init__(self, repository: Repository, data: AnalysisSet | None = None) -> None:
        self._repository = repository
        self._data = data if data is not None else AnalysisSet()
        self._findings: list[Finding] = []
        self._analysis_visible = False

    @classmethod
    def open(cls, repository: Repository) -> Session:
        """Start a session from the last saved snapshot, if any."""
        data = normalize(repository.load())
        logger.info("Session opened: %d items", data.total_items())
        return cls(repository, data)

    @property
    def data(self) -> AnalysisSet:
        return self._data

    @property
    def findings(self) -> list[Finding]:
        return list(self._findings)

    @property
    def analysis_visible(self) -> bool:
        return self._analysis_visible

    def _persist(self) -> None:
        self._repository.save_later(self._data)

    # ── Item operations ───────────────────────────────────────────

    def add_item(
        self,
        category: Category,
        text: str,
        priority: Priority = Priority.MEDIUM,
        responsible: str = "",
    ) -> Item:
        text = text.strip()
        if not text:
            raise InvalidItemError("Item text must not be empty")

        item = Item(text=text, priority=Priority(priority), responsible=responsible.strip())
        self._data.items(category).append(item)
        self._persist()
        logger.info("Item added: category=%s id=%s", Category(category).value, item.id)
        return item

    def find_item(self, category: Category, item_id: str) -> Item | None:
        for item in self._data.items(category):
            if item.id == item_id:
                return item
        return None

    def edit_item(
        self,
        category: Category,
        item_id: str,
        text: str,
        priority: Priority,
        responsible: str = "",
    ) -> Item | None:
        """Update text, priority and responsible in place; id and createdAt never change.

        Returns None, changing nothing, when the id is not in ``category``.
        """
        text = text.strip()
        if not text:
            raise InvalidItemError("Item text must not be empty")

        item = self.find_item(category, item_id)
        if item is None:
            return None

        item.text = text
        item.priority = Priority(priority)
        item.responsible = responsible.strip()
        self._persist()
        logger.info("Item edited: category=%s id=%s", Category(category).value, item_id)
        return item

    def remove_item(self, category: Category, item_id: str) -> bool:
        items = self._data.items(category)
        kept = [item for item in items if item.id != item_id]
        if len(kept) == len(items):
            return False

        items[:] = kept
        self._persist()
        logger.info("Item removed: category=%s id=%s", Category(category).value, item_id)
        return True

    def clear(self) -> None:
        self._data = AnalysisSet()
        self.hide_analysis()
        self._persist()
        logger.info("SWOT data cleared")

    def replace(self, data: AnalysisSet) -> None:
        self._data = data
        self.hide_analysis()
        self._persist()

    def import_json(self, contents: str | bytes) -> AnalysisSet:
        """Replace the whole data set with an imported file.

        On MalformedImportError the current data set is left untouched.
        """
        data = parse_import(contents)
        self.replace(data)
        return data

    # ── Analysis ──────────────────────────────────────────────────

    def generate_analysis(self) -> list[Finding]:
        self._findings = analyze(self._data)
        self._analysis_visible = True
        return self.findings

    def hide_analysis(self) -> None:
        self._findings = []
        self._analysis_visible = False

    def toggle_analysis(self) -> list[Finding]:
        if self._analysis_visible:
            self.hide_analysis()
            return []
        return self.generate_analysis()
