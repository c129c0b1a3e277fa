"""
Data models for PocketBook.

These models represent the output of text extraction: cleaned per-page
text and the processed book assembled from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

PAGE_SEPARATOR = "\n\n"


class Language(Enum):
    """Natural languages the extraction pipeline can detect."""

    TURKISH = "turkish"
    ENGLISH = "english"
    SPANISH = "spanish"
    FRENCH = "french"
    GERMAN = "german"
    ITALIAN = "italian"
    PORTUGUESE = "portuguese"
    RUSSIAN = "russian"
    CHINESE = "chinese"
    JAPANESE = "japanese"
    KOREAN = "korean"
    ARABIC = "arabic"
    UNKNOWN = "unknown"

    @property
    def locale_tag(self) -> str:
        """Canonical locale tag (e.g. "tr-TR")."""
        return _LOCALE_TAGS[self]

    @property
    def iso_code(self) -> str | None:
        """ISO 639-1 code, or None for UNKNOWN."""
        return _ISO_CODES.get(self)

    @property
    def recognition_languages(self) -> tuple[str, ...]:
        """
        Ordered OCR language hints for this language.

        Primary locale first, then an English fallback. CJK languages use
        a script-specific fallback only.
        """
        return _RECOGNITION_LANGUAGES[self]

    @property
    def is_cjk(self) -> bool:
        """Whether the language is written in a CJK script."""
        return self in (Language.CHINESE, Language.JAPANESE, Language.KOREAN)

    @property
    def uses_latin_formatting(self) -> bool:
        """Whether capitalization and terminal-period rules apply."""
        return not (self.is_cjk or self is Language.ARABIC)

    @classmethod
    def from_iso_code(cls, code: str | None) -> Language | None:
        """
        Map an ISO 639-1 code to a Language.

        Region suffixes are ignored ("zh-cn" and "zh-tw" both map to
        CHINESE). Returns None for codes outside the supported set.
        """
        if not code:
            return None
        primary = code.lower().replace("_", "-").split("-")[0]
        for language, iso in _ISO_CODES.items():
            if iso == primary:
                return language
        return None


_LOCALE_TAGS = {
    Language.TURKISH: "tr-TR",
    Language.ENGLISH: "en-US",
    Language.SPANISH: "es-ES",
    Language.FRENCH: "fr-FR",
    Language.GERMAN: "de-DE",
    Language.ITALIAN: "it-IT",
    Language.PORTUGUESE: "pt-BR",
    Language.RUSSIAN: "ru-RU",
    Language.CHINESE: "zh-CN",
    Language.JAPANESE: "ja-JP",
    Language.KOREAN: "ko-KR",
    Language.ARABIC: "ar-SA",
    Language.UNKNOWN: "en-US",
}

_ISO_CODES = {
    Language.TURKISH: "tr",
    Language.ENGLISH: "en",
    Language.SPANISH: "es",
    Language.FRENCH: "fr",
    Language.GERMAN: "de",
    Language.ITALIAN: "it",
    Language.PORTUGUESE: "pt",
    Language.RUSSIAN: "ru",
    Language.CHINESE: "zh",
    Language.JAPANESE: "ja",
    Language.KOREAN: "ko",
    Language.ARABIC: "ar",
}

_RECOGNITION_LANGUAGES = {
    Language.TURKISH: ("tr-TR", "en-US"),
    Language.ENGLISH: ("en-US", "tr-TR"),
    Language.SPANISH: ("es-ES", "en-US"),
    Language.FRENCH: ("fr-FR", "en-US"),
    Language.GERMAN: ("de-DE", "en-US"),
    Language.ITALIAN: ("it-IT", "en-US"),
    Language.PORTUGUESE: ("pt-BR", "pt-PT", "en-US"),
    Language.RUSSIAN: ("ru-RU", "en-US"),
    Language.CHINESE: ("zh-CN", "zh-TW"),
    Language.JAPANESE: ("ja-JP",),
    Language.KOREAN: ("ko-KR",),
    Language.ARABIC: ("ar-SA", "en-US"),
    Language.UNKNOWN: ("en-US", "tr-TR"),
}


@dataclass(frozen=True)
class PageText:
    """
    Cleaned text of one scanned page.

    The source image is kept only as a reference for previews; it is not
    compared, serialized or modified.
    """

    page_number: int  # 1-based, sequential within a book
    text: str
    source_image: Any = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the stored page record."""
        return {"pageNumber": self.page_number, "text": self.text}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PageText:
        """Build a page from a stored page record."""
        return cls(page_number=int(data["pageNumber"]), text=str(data["text"]))


@dataclass(frozen=True)
class ProcessedBook:
    """
    The main output type: pages, paragraphs and full text of a book.

    ``full_text`` is the page texts joined by a blank line. ``paragraphs``
    is a coarser grouping of the same content, reflowed for reading.

    Example:
        >>> book = pipeline.process(pages)
        >>> for paragraph in book.paragraphs:
        ...     print(paragraph)
    """

    pages: tuple[PageText, ...] = ()
    paragraphs: tuple[str, ...] = ()
    full_text: str = ""
    language: Language = Language.UNKNOWN

    @property
    def page_count(self) -> int:
        """Number of pages in the book."""
        return len(self.pages)

    @property
    def is_empty(self) -> bool:
        """Whether the book has no pages."""
        return not self.pages

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Record with ``pages``, ``paragraphs``, ``fullText`` and
            ``language`` (ISO 639-1 code or None)
        """
        return {
            "pages": [page.to_dict() for page in self.pages],
            "paragraphs": list(self.paragraphs),
            "fullText": self.full_text,
            "language": self.language.iso_code,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProcessedBook:
        """
        Build a book from a record produced by ``to_dict``.

        Records written without a ``language`` key load as UNKNOWN.
        """
        pages = tuple(PageText.from_dict(page) for page in data["pages"])
        return cls(
            pages=tuple(sorted(pages, key=lambda page: page.page_number)),
            paragraphs=tuple(str(p) for p in data["paragraphs"]),
            full_text=str(data["fullText"]),
            language=Language.from_iso_code(data.get("language")) or Language.UNKNOWN,
        )
