"""
Unit tests for PocketBook data models and configuration.
"""

import pytest

from pocketbook.config import ExtractionConfig, OCRConfig
from pocketbook.exceptions import ConfigurationError
from pocketbook.models import Language, PageText, ProcessedBook

# =============================================================================
# Language
# =============================================================================


class TestLanguage:
    """Tests for the Language enum."""

    def test_locale_tags(self):
        """Each language carries its canonical locale tag."""
        assert Language.TURKISH.locale_tag == "tr-TR"
        assert Language.PORTUGUESE.locale_tag == "pt-BR"
        assert Language.UNKNOWN.locale_tag == "en-US"

    def test_recognition_languages_have_english_fallback(self):
        """Non-CJK languages list their locale first and English as fallback."""
        assert Language.TURKISH.recognition_languages == ("tr-TR", "en-US")
        assert Language.PORTUGUESE.recognition_languages == ("pt-BR", "pt-PT", "en-US")
        assert Language.ARABIC.recognition_languages == ("ar-SA", "en-US")

    def test_english_and_unknown_fall_back_to_turkish(self):
        """English and UNKNOWN read with English first, Turkish second."""
        assert Language.ENGLISH.recognition_languages == ("en-US", "tr-TR")
        assert Language.UNKNOWN.recognition_languages == ("en-US", "tr-TR")

    def test_cjk_recognition_languages(self):
        """CJK languages use script-specific hints only."""
        assert Language.CHINESE.recognition_languages == ("zh-CN", "zh-TW")
        assert Language.JAPANESE.recognition_languages == ("ja-JP",)
        assert Language.KOREAN.recognition_languages == ("ko-KR",)

    @pytest.mark.parametrize(
        "code, expected",
        [
            ("tr", Language.TURKISH),
            ("EN", Language.ENGLISH),
            ("zh-cn", Language.CHINESE),
            ("pt_BR", Language.PORTUGUESE),
            ("nl", None),
            ("", None),
            (None, None),
        ],
    )
    def test_from_iso_code(self, code, expected):
        """ISO codes map onto the supported languages."""
        assert Language.from_iso_code(code) == expected

    def test_formatting_flags(self):
        """CJK and Arabic skip Latin paragraph formatting."""
        assert Language.JAPANESE.is_cjk
        assert not Language.ARABIC.is_cjk
        assert not Language.ARABIC.uses_latin_formatting
        assert Language.GERMAN.uses_latin_formatting


# =============================================================================
# PageText / ProcessedBook
# =============================================================================


class TestPageText:
    """Tests for PageText."""

    def test_source_image_ignored_in_equality(self):
        """Pages compare by number and text only."""
        assert PageText(1, "text", source_image=object()) == PageText(1, "text")

    def test_immutable(self):
        """Pages cannot be modified after creation."""
        page = PageText(1, "text")
        with pytest.raises(AttributeError):
            page.text = "other"

    def test_to_dict(self):
        """Pages serialize to the stored page record."""
        assert PageText(2, "hello").to_dict() == {"pageNumber": 2, "text": "hello"}


class TestProcessedBook:
    """Tests for ProcessedBook."""

    @pytest.fixture
    def book(self):
        """A small two-page book."""
        return ProcessedBook(
            pages=(PageText(1, "first page"), PageText(2, "second page")),
            paragraphs=("First page second page.",),
            full_text="first page\n\nsecond page",
            language=Language.ENGLISH,
        )

    def test_to_dict(self, book):
        """Books serialize to the stored record shape."""
        assert book.to_dict() == {
            "pages": [
                {"pageNumber": 1, "text": "first page"},
                {"pageNumber": 2, "text": "second page"},
            ],
            "paragraphs": ["First page second page."],
            "fullText": "first page\n\nsecond page",
            "language": "en",
        }

    def test_from_dict(self, book):
        """A serialized book loads back unchanged."""
        assert ProcessedBook.from_dict(book.to_dict()) == book

    def test_from_dict_without_language(self):
        """Records without a language load as UNKNOWN."""
        record = {"pages": [], "paragraphs": [], "fullText": ""}
        assert ProcessedBook.from_dict(record).language == Language.UNKNOWN

    def test_from_dict_orders_pages(self):
        """Pages are restored in page-number order."""
        record = {
            "pages": [{"pageNumber": 2, "text": "b"}, {"pageNumber": 1, "text": "a"}],
            "paragraphs": [],
            "fullText": "a\n\nb",
        }
        book = ProcessedBook.from_dict(record)
        assert [page.page_number for page in book.pages] == [1, 2]

    def test_empty_book(self):
        """A default book is empty."""
        book = ProcessedBook()
        assert book.is_empty
        assert book.page_count == 0


# =============================================================================
# Configuration
# =============================================================================


class TestConfig:
    """Tests for configuration validation."""

    def test_defaults(self):
        """Defaults sample the head of the first three pages."""
        config = ExtractionConfig()
        assert config.sample_pages == 3
        assert config.sample_chars == 500
        assert config.max_workers is None
        assert config.ocr.engine == "tesseract"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"sample_pages": 0},
            {"sample_chars": 0},
            {"max_workers": 0},
        ],
    )
    def test_invalid_extraction_config(self, kwargs):
        """Out-of-range values are rejected."""
        with pytest.raises(ConfigurationError):
            ExtractionConfig(**kwargs)

    def test_invalid_engine(self):
        """Unknown engines are rejected."""
        with pytest.raises(ConfigurationError):
            OCRConfig(engine="vision")

    def test_configuration_error_is_value_error(self):
        """ConfigurationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            OCRConfig(fast_max_dimension=10)
