"""Tests for the page sequencer."""

from onboarding.models.catalog import DEFAULT_QUESTIONS
from onboarding.wizard import PREFIX_PAGE_COUNT, PageKind, PageSequencer, Transition


class TestPageStructure:
    """Tests for the page list built from the question catalog."""

    def test_total_pages(self):
        """Test three prefix pages plus one page per question."""
        assert PREFIX_PAGE_COUNT == 3
        assert PageSequencer(DEFAULT_QUESTIONS).total_pages == 8
        assert PageSequencer(DEFAULT_QUESTIONS[:4]).total_pages == 7

    def test_page_kinds(self):
        """Test the fixed prefix order followed by question pages."""
        pages = PageSequencer(DEFAULT_QUESTIONS).pages
        assert [page.kind for page in pages[:3]] == [
            PageKind.LANGUAGE,
            PageKind.NAME,
            PageKind.CURRENCY,
        ]
        assert all(page.kind == PageKind.QUESTION for page in pages[3:])
        assert [page.index for page in pages] == list(range(8))

    def test_question_for_page(self):
        """Test mapping page indices to questions."""
        sequencer = PageSequencer(DEFAULT_QUESTIONS)
        assert sequencer.question_for_page(3).id == "goal"
        assert sequencer.question_for_page(7).id == "challenge"
        assert sequencer.question_for_page(0) is None
        assert sequencer.question_for_page(8) is None

    def test_page_index_for_question(self):
        """Test the reverse mapping."""
        sequencer = PageSequencer(DEFAULT_QUESTIONS)
        assert sequencer.page_index_for_question("situation") == 6
        assert sequencer.page_index_for_question("unknown") is None

    def test_page_at_out_of_range(self):
        """Test that out-of-range indices have no page."""
        sequencer = PageSequencer(DEFAULT_QUESTIONS)
        assert sequencer.page_at(-1) is None
        assert sequencer.page_at(8) is None


class TestNavigation:
    """Tests for moving between pages."""

    def test_back_on_first_page_is_noop(self):
        """Test that go_back never moves below zero."""
        sequencer = PageSequencer(DEFAULT_QUESTIONS)
        assert not sequencer.can_go_back()
        assert sequencer.go_back() == 0
        assert sequencer.is_first_page()

    def test_forward_until_completed(self):
        """Test ADVANCED on every page but the last, then COMPLETED."""
        sequencer = PageSequencer(DEFAULT_QUESTIONS)
        transitions = [sequencer.go_forward() for _ in range(7)]
        assert transitions == [Transition.ADVANCED] * 7
        assert sequencer.is_last_page()

        assert sequencer.go_forward() == Transition.COMPLETED
        assert sequencer.page_index == 7

    def test_construction_clamps_index(self):
        """Test that a restored index is clamped into range."""
        assert PageSequencer(DEFAULT_QUESTIONS, page_index=99).page_index == 7
        assert PageSequencer(DEFAULT_QUESTIONS, page_index=-3).page_index == 0

    def test_forward_then_back_returns_to_start(self):
        """Test a forward step is undone by one back step on every page but the last."""
        for start in range(7):
            sequencer = PageSequencer(DEFAULT_QUESTIONS, page_index=start)
            assert sequencer.go_forward() == Transition.ADVANCED
            assert sequencer.go_back() == start
            assert sequencer.page_index == start

    def test_jump_to_clamps(self):
        """Test restoring a position."""
        sequencer = PageSequencer(DEFAULT_QUESTIONS)
        assert sequencer.jump_to(4) == 4
        assert sequencer.jump_to(100) == 7
        assert sequencer.jump_to(-1) == 0


class TestProgress:
    """Tests for progress display values."""

    def test_progress_on_first_page(self):
        """Test the first page counts as page one."""
        sequencer = PageSequencer(DEFAULT_QUESTIONS)
        assert sequencer.progress_fraction() == 1 / 8
        assert sequencer.progress_label() == "1/8"

    def test_progress_on_last_page(self):
        """Test the last page shows a full bar."""
        sequencer = PageSequencer(DEFAULT_QUESTIONS, page_index=7)
        assert sequencer.progress_fraction() == 1.0
        assert sequencer.progress_label() == "8/8"

    def test_progress_is_monotonic(self):
        """Test the bar never shrinks while moving forward."""
        sequencer = PageSequencer(DEFAULT_QUESTIONS)
        fractions = [sequencer.progress_fraction()]
        for _ in range(7):
            sequencer.go_forward()
            fractions.append(sequencer.progress_fraction())
        assert fractions == sorted(fractions)
        assert all(0.0 <= f <= 1.0 for f in fractions)
