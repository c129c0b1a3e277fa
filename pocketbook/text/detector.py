"""
Language detection for OCR output.

Detection combines three signals, first match wins:
1. Script ranges (CJK, Hangul, Arabic, Cyrillic) - unambiguous when present
2. Statistical identification with langdetect (Google's algorithm)
3. Lexical scoring of diacritics and stop-words for Latin-script languages

Detection never fails: with no usable evidence it returns Language.UNKNOWN.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from langdetect import DetectorFactory
from langdetect import detect as langdetect_detect
from langdetect.lang_detect_exception import LangDetectException

from pocketbook.models import Language
from pocketbook.text.languages import LEXICAL_PROFILES, SCRIPT_RANGES

logger = logging.getLogger(__name__)

# Make language detection deterministic
DetectorFactory.seed = 0


# =============================================================================
# CONSTANTS
# =============================================================================

# Only the head of the text is passed to the statistical model
STATISTICAL_SAMPLE_CHARS = 1000

# Whole-document detection samples the head of the first few pages
DEFAULT_SAMPLE_PAGES = 3
DEFAULT_SAMPLE_CHARS = 500

CHAR_SCORE_WEIGHT = 10
WORD_SCORE_WEIGHT = 5


# =============================================================================
# DETECTOR
# =============================================================================


class LanguageDetector:
    """
    Detects the dominant natural language of a text sample.

    Example:
        >>> detector = LanguageDetector()
        >>> detector.detect("Bu bir kitap ve çok güzel")
        <Language.TURKISH: 'turkish'>
    """

    def detect(self, sample_text: str) -> Language:
        """
        Detect the language of a text sample.

        Args:
            sample_text: Text to analyze (any length).

        Returns:
            Detected Language, UNKNOWN when there is no evidence.
        """
        if not sample_text or not sample_text.strip():
            return Language.UNKNOWN

        language = self.detect_script(sample_text)
        if language is not None:
            logger.debug("Detected %s from script range", language.value)
            return language

        language = self.detect_statistical(sample_text)
        if language is not None:
            logger.debug("Detected %s with langdetect", language.value)
            return language

        language = self.detect_lexical(sample_text)
        logger.debug("Detected %s from lexical scores", language.value)
        return language

    def detect_from_samples(
        self,
        samples: Iterable[str],
        max_samples: int = DEFAULT_SAMPLE_PAGES,
        sample_chars: int = DEFAULT_SAMPLE_CHARS,
    ) -> Language:
        """
        Detect the language of a document from per-page samples.

        Takes the head of each of the first ``max_samples`` samples and
        joins them with single spaces before detection.
        """
        heads = []
        for sample in samples:
            if len(heads) >= max_samples:
                break
            heads.append(sample[:sample_chars])
        return self.detect(" ".join(heads))

    def detect_script(self, text: str) -> Language | None:
        """Return the language of the first script range present in text."""
        for language, pattern in SCRIPT_RANGES:
            if pattern.search(text):
                return language
        return None

    def detect_statistical(self, text: str) -> Language | None:
        """
        Identify the language with langdetect.

        Returns None when langdetect finds no features or its top result
        is outside the supported languages.
        """
        sample = text[:STATISTICAL_SAMPLE_CHARS]
        try:
            code = langdetect_detect(sample)
        except LangDetectException as e:
            logger.debug("langdetect gave no result: %s", e)
            return None

        language = Language.from_iso_code(code)
        if language is None:
            logger.debug("langdetect returned unsupported language %r", code)
        return language

    def detect_lexical(self, text: str) -> Language:
        """
        Pick the Latin-script language with the highest lexical score.

        Ties go to the language listed first in the profile table.
        """
        best_language = Language.UNKNOWN
        best_score = 0.0
        for language, score in self.scores(text).items():
            if score > best_score:
                best_language = language
                best_score = score
        return best_language

    def scores(self, text: str) -> dict[Language, float]:
        """
        Compute lexical scores for each Latin-script language.

        score = special_chars / letters * 10 + stopword_hits / tokens * 5
        """
        letters = sum(1 for char in text if char.isalpha())
        tokens = text.lower().split()

        scores: dict[Language, float] = {}
        for language, profile in LEXICAL_PROFILES.items():
            char_score = 0.0
            if letters:
                special = sum(1 for char in text if char in profile.special_chars)
                char_score = special / letters * CHAR_SCORE_WEIGHT

            word_score = 0.0
            if tokens:
                hits = sum(1 for token in tokens if token in profile.stop_words)
                word_score = hits / len(tokens) * WORD_SCORE_WEIGHT

            scores[language] = char_score + word_score
        return scores


def detect_language(text: str) -> Language:
    """Detect the dominant language of text with a default detector."""
    return LanguageDetector().detect(text)
