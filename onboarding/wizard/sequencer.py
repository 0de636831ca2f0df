"""
Page Sequencer

The wizard's state machine over an explicit, ordered page list:

    [language, name, currency, question 1, ..., question N] -> terminal

DESIGN DECISION: This is the only place that knows how page indices
map onto prefix pages and questions. Everything else asks the
sequencer for a WizardPage instead of doing arithmetic on offsets.

Only adjacent transitions exist. No page can be skipped and there is
no random access from the UI; jump_to() exists for restoring a host's
page position and clamps out-of-range input.
"""

from enum import Enum
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict

from onboarding.models.survey import Question


class PageKind(str, Enum):
    """What a wizard page collects."""
    LANGUAGE = "language"
    NAME = "name"
    CURRENCY = "currency"
    QUESTION = "question"


class Transition(str, Enum):
    """Outcome of a forward gesture."""
    ADVANCED = "advanced"    # Moved to the next page
    COMPLETED = "completed"  # Forward from the last page: emit the result
    BLOCKED = "blocked"      # Current page is not valid yet


# Fixed product policy: order and count are not configurable
PREFIX_PAGES: tuple[PageKind, ...] = (
    PageKind.LANGUAGE,
    PageKind.NAME,
    PageKind.CURRENCY,
)
PREFIX_PAGE_COUNT = len(PREFIX_PAGES)


class WizardPage(BaseModel):
    """One entry in the page list."""
    model_config = ConfigDict(frozen=True)

    index: int
    kind: PageKind
    question_id: Optional[str] = None

    @property
    def is_question(self) -> bool:
        return self.kind == PageKind.QUESTION


class PageSequencer:
    """
    Owns the current page index.

    The sequencer does not validate pages. The wizard asks the
    validation gate first and only then calls go_forward().
    """

    def __init__(self, questions: Sequence[Question], page_index: int = 0):
        """
        Initialize the sequencer.

        Args:
            questions: Question catalog, in page order.
            page_index: Starting page; clamped into range.
        """
        self._questions = tuple(questions)
        self._pages = self._build_pages(self._questions)
        self._page_index = self._clamp(page_index)

    @staticmethod
    def _build_pages(questions: tuple[Question, ...]) -> tuple[WizardPage, ...]:
        pages = [
            WizardPage(index=index, kind=kind)
            for index, kind in enumerate(PREFIX_PAGES)
        ]
        for offset, question in enumerate(questions):
            pages.append(WizardPage(
                index=PREFIX_PAGE_COUNT + offset,
                kind=PageKind.QUESTION,
                question_id=question.id,
            ))
        return tuple(pages)

    def _clamp(self, index: int) -> int:
        return min(max(index, 0), self.total_pages - 1)

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def pages(self) -> tuple[WizardPage, ...]:
        return self._pages

    @property
    def total_pages(self) -> int:
        return PREFIX_PAGE_COUNT + len(self._questions)

    @property
    def page_index(self) -> int:
        return self._page_index

    def page_at(self, index: int) -> Optional[WizardPage]:
        """Page at an index, or None when out of range."""
        if 0 <= index < len(self._pages):
            return self._pages[index]
        return None

    def current_page(self) -> WizardPage:
        return self._pages[self._page_index]

    def question_for_page(self, index: int) -> Optional[Question]:
        """The question shown on a page, or None for prefix/out-of-range pages."""
        page = self.page_at(index)
        if page is None or not page.is_question:
            return None
        return self._questions[index - PREFIX_PAGE_COUNT]

    def page_index_for_question(self, question_id: str) -> Optional[int]:
        for page in self._pages[PREFIX_PAGE_COUNT:]:
            if page.question_id == question_id:
                return page.index
        return None

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def is_first_page(self) -> bool:
        return self._page_index == 0

    def is_last_page(self) -> bool:
        return self._page_index == self.total_pages - 1

    def can_go_back(self) -> bool:
        return self._page_index > 0

    def go_back(self) -> int:
        """Move one page back; a no-op on the first page."""
        self._page_index = max(self._page_index - 1, 0)
        return self._page_index

    def go_forward(self) -> Transition:
        """
        Move one page forward.

        On the last page this does not increment: forward and submit
        are the same gesture, and this signals the terminal transition.
        """
        if self._page_index < self.total_pages - 1:
            self._page_index += 1
            return Transition.ADVANCED
        return Transition.COMPLETED

    def jump_to(self, index: int) -> int:
        """Restore a page position; out-of-range input is clamped."""
        self._page_index = self._clamp(index)
        return self._page_index

    # -------------------------------------------------------------------------
    # Progress display
    # -------------------------------------------------------------------------

    def progress_fraction(self) -> float:
        """Fraction for the progress bar, always within [0, 1]."""
        total = self.total_pages
        if total <= 0:
            return 0.0
        fraction = min(self._page_index + 1, total) / total
        return min(max(fraction, 0.0), 1.0)

    def progress_label(self) -> str:
        """Header counter such as '3/8'."""
        return f"{min(self._page_index + 1, self.total_pages)}/{self.total_pages}"
