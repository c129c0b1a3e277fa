"""
Unit tests for paragraph segmentation.
"""

import pytest

from pocketbook.models import Language
from pocketbook.text.languages import min_paragraph_length
from pocketbook.text.paragraphs import ParagraphSegmenter

LONG_A = "the first paragraph is comfortably longer than fifty characters"
LONG_B = "the second paragraph is also comfortably longer than fifty chars"


@pytest.fixture
def segmenter():
    """Create a segmenter instance for testing."""
    return ParagraphSegmenter()


class TestMinParagraphLength:
    """Tests for per-language thresholds."""

    @pytest.mark.parametrize(
        "language, expected",
        [
            (Language.CHINESE, 20),
            (Language.JAPANESE, 20),
            (Language.KOREAN, 20),
            (Language.ARABIC, 30),
            (Language.ENGLISH, 50),
            (Language.TURKISH, 50),
            (Language.UNKNOWN, 50),
        ],
    )
    def test_thresholds(self, language, expected):
        """Denser scripts use shorter thresholds."""
        assert min_paragraph_length(language) == expected


class TestSegmentation:
    """Tests for splitting and merging."""

    def test_long_fragments_kept_apart(self, segmenter):
        """Fragments meeting the threshold become separate paragraphs."""
        paragraphs = segmenter.segment(f"{LONG_A}\n\n{LONG_B}", Language.ENGLISH)
        assert paragraphs == [
            "The first paragraph is comfortably longer than fifty characters.",
            "The second paragraph is also comfortably longer than fifty chars.",
        ]

    def test_short_fragments_merge(self, segmenter):
        """Two consecutive 10-char fragments merge into one paragraph."""
        paragraphs = segmenter.segment("abcdefghij\n\nklmnopqrst", Language.ENGLISH)
        assert paragraphs == ["Abcdefghij klmnopqrst."]

    def test_first_fragment_kept_even_if_short(self, segmenter):
        """A short first fragment starts a paragraph; the next long one flushes it."""
        paragraphs = segmenter.segment(f"Chapter 1\n\n{LONG_A}", Language.ENGLISH)
        assert len(paragraphs) == 2
        assert paragraphs[0] == "Chapter 1."

    def test_short_fragment_joins_previous(self, segmenter):
        """A short fragment after a long one is appended to it."""
        paragraphs = segmenter.segment(f"{LONG_A}\n\nand more", Language.ENGLISH)
        assert paragraphs == [
            "The first paragraph is comfortably longer than fifty characters and more."
        ]

    def test_round_trip_when_all_fragments_long(self, segmenter):
        """Re-segmenting joined paragraphs keeps the same boundaries."""
        paragraphs = segmenter.segment(f"{LONG_A}\n\n{LONG_B}", Language.ENGLISH)
        again = segmenter.segment("\n\n".join(paragraphs), Language.ENGLISH)
        assert again == paragraphs

    def test_empty_fragments_dropped(self, segmenter):
        """Blank fragments between separators are ignored."""
        paragraphs = segmenter.segment(f"\n\n  \n\n{LONG_A}\n\n\n\n", Language.ENGLISH)
        assert len(paragraphs) == 1

    def test_empty_text(self, segmenter):
        """Empty text gives no paragraphs."""
        assert segmenter.segment("", Language.ENGLISH) == []

    def test_cjk_threshold(self, segmenter):
        """CJK fragments of 20+ characters stand alone."""
        first = "我" * 20
        second = "们" * 20
        assert segmenter.segment(f"{first}\n\n{second}", Language.CHINESE) == [first, second]


class TestFormatting:
    """Tests for per-paragraph formatting."""

    def test_english_capitalized_and_terminated(self, segmenter):
        """Latin-script paragraphs get a capital and a closing period."""
        assert segmenter.format_paragraph("hello world", Language.ENGLISH) == "Hello world."

    @pytest.mark.parametrize("ending", [".", "!", "?"])
    def test_existing_terminal_punctuation_kept(self, segmenter, ending):
        """No period is added after terminal punctuation."""
        text = f"Already done{ending}"
        assert segmenter.format_paragraph(text, Language.ENGLISH) == text

    def test_leading_junk_stripped(self, segmenter):
        """Leading dashes, underscores, equals signs and asterisks are removed."""
        assert segmenter.format_paragraph("-- *_= note", Language.ENGLISH) == "Note."

    def test_cjk_untouched(self, segmenter):
        """CJK paragraphs are neither capitalized nor terminated."""
        paragraphs = segmenter.segment("我们今天读书没有句号也没有大写字母的概念", Language.CHINESE)
        assert paragraphs == ["我们今天读书没有句号也没有大写字母的概念"]

    def test_cjk_with_latin_not_uppercased(self, segmenter):
        """Latin letters in CJK paragraphs keep their case."""
        assert segmenter.format_paragraph("abc 日本", Language.JAPANESE) == "abc 日本"

    def test_arabic_untouched(self, segmenter):
        """Arabic paragraphs get no terminal period."""
        assert segmenter.format_paragraph("- مرحبا", Language.ARABIC) == "مرحبا"

    def test_separator_only_fragment_dropped(self, segmenter):
        """A fragment of separator characters produces no paragraph."""
        assert segmenter.segment("----", Language.ENGLISH) == []
