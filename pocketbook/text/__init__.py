"""
Language-aware post-processing of OCR text.

- LanguageDetector: script ranges, langdetect, lexical scoring
- TextNormalizer: whole-token and language-specific OCR fixes
- ParagraphSegmenter: blank-line splitting with short-fragment merging
"""

from pocketbook.text.detector import LanguageDetector, detect_language
from pocketbook.text.languages import min_paragraph_length
from pocketbook.text.normalizer import TextNormalizer, normalize_text
from pocketbook.text.paragraphs import ParagraphSegmenter

__all__ = [
    "LanguageDetector",
    "detect_language",
    "TextNormalizer",
    "normalize_text",
    "ParagraphSegmenter",
    "min_paragraph_length",
]
