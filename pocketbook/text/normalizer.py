"""
Rule-based correction of raw OCR text.

Stages, applied in fixed order:
1. Basic cleanup: whitespace collapsing and whole-token OCR confusions
2. Language-specific literal replacements (diacritics, homoglyphs)
3. Punctuation spacing

Normalization is a pure function of (text, language) and never fails.
"""

from __future__ import annotations

import logging
import re

from pocketbook.models import Language
from pocketbook.text.languages import CJK_CHARACTER_CLASS, LANGUAGE_FIXES, WHOLE_TOKEN_FIXES

logger = logging.getLogger(__name__)


# =============================================================================
# PATTERNS
# =============================================================================

WHITESPACE_RUN = re.compile(r"\s+")
EXCESS_NEWLINES = re.compile(r"\n{3,}")

WHOLE_TOKEN_PATTERNS: tuple[tuple[re.Pattern, str], ...] = tuple(
    (re.compile(rf"\b{re.escape(wrong)}\b"), right) for wrong, right in WHOLE_TOKEN_FIXES
)

CJK_INNER_SPACE = re.compile(rf"(?<={CJK_CHARACTER_CLASS})\s+(?={CJK_CHARACTER_CLASS})")

SPACE_BEFORE_PUNCTUATION = re.compile(r"\s+([.,!?;:])")
MISSING_SPACE_AFTER_PUNCTUATION = re.compile(
    r"([.,!?;:])([a-zA-ZçğıöşüÇĞIİÖŞÜáéíóúàèìòùâêîôûäëïöüñ])"
)


class TextNormalizer:
    """
    Applies generic and language-specific corrections to raw OCR text.

    Example:
        >>> normalizer = TextNormalizer()
        >>> normalizer.normalize("c,ay  ve simit", Language.TURKISH)
        'çay ve simit'
    """

    def normalize(self, raw_text: str, language: Language) -> str:
        """
        Clean raw OCR text for the given language.

        Args:
            raw_text: Text as returned by the OCR engine.
            language: Detected document language.

        Returns:
            Cleaned text; empty string for empty or whitespace-only input.
        """
        if not raw_text or not raw_text.strip():
            return ""

        text = self.basic_cleanup(raw_text)
        text = self.apply_language_fixes(text, language)
        text = self.fix_punctuation(text, language)
        result = text.strip()

        logger.debug(
            "Normalized %d -> %d chars (%s)", len(raw_text), len(result), language.value
        )
        return result

    def basic_cleanup(self, text: str) -> str:
        """Collapse whitespace and fix whole-token OCR confusions."""
        text = WHITESPACE_RUN.sub(" ", text)
        text = EXCESS_NEWLINES.sub("\n\n", text)
        for pattern, replacement in WHOLE_TOKEN_PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def apply_language_fixes(self, text: str, language: Language) -> str:
        """
        Apply the language's replacement table in order.

        CJK text instead loses whitespace between adjacent CJK characters.
        """
        if language.is_cjk:
            return CJK_INNER_SPACE.sub("", text)

        for wrong, right in LANGUAGE_FIXES.get(language, ()):
            text = text.replace(wrong, right)
        return text

    def fix_punctuation(self, text: str, language: Language) -> str:
        """Remove space before punctuation; add one after it for non-CJK text."""
        text = SPACE_BEFORE_PUNCTUATION.sub(r"\1", text)
        if not language.is_cjk:
            text = MISSING_SPACE_AFTER_PUNCTUATION.sub(r"\1 \2", text)
        return text


def normalize_text(raw_text: str, language: Language) -> str:
    """Normalize raw OCR text with a default normalizer."""
    return TextNormalizer().normalize(raw_text, language)
