"""
Paragraph segmentation for the reader view.

Splits full text on blank lines, merges fragments that are too short to
stand alone, and formats each paragraph for its language.
"""

from __future__ import annotations

import re

from pocketbook.models import PAGE_SEPARATOR, Language
from pocketbook.text.languages import min_paragraph_length

LEADING_JUNK = re.compile(r"^[\s\-_=*]+")
TERMINAL_PUNCTUATION = (".", "!", "?")


class ParagraphSegmenter:
    """
    Splits text into reading paragraphs.

    Fragments shorter than the language's minimum paragraph length are
    joined onto the paragraph before them. The first fragment always
    starts a paragraph, however short.

    Example:
        >>> segmenter = ParagraphSegmenter()
        >>> segmenter.segment("Chapter one\\n\\nit was late", Language.ENGLISH)
        ['Chapter one it was late.']
    """

    def segment(self, full_text: str, language: Language) -> list[str]:
        """
        Split text into formatted paragraphs.

        Args:
            full_text: Text with paragraphs separated by blank lines.
            language: Language controlling thresholds and formatting.

        Returns:
            Paragraphs in reading order.
        """
        fragments = [f.strip() for f in full_text.split(PAGE_SEPARATOR)]
        fragments = [f for f in fragments if f]

        min_length = min_paragraph_length(language)
        paragraphs: list[str] = []
        current = ""

        for fragment in fragments:
            if len(fragment) < min_length and current:
                current += " " + fragment
            else:
                self._flush(current, language, paragraphs)
                current = fragment

        self._flush(current, language, paragraphs)
        return paragraphs

    def format_paragraph(self, paragraph: str, language: Language) -> str:
        """
        Format a single paragraph.

        Leading whitespace, dashes, underscores, equals signs and asterisks
        are stripped. Latin-script paragraphs get an uppercase first letter
        and a closing period when they lack terminal punctuation.
        """
        formatted = LEADING_JUNK.sub("", paragraph)
        if not formatted or not language.uses_latin_formatting:
            return formatted

        formatted = formatted[0].upper() + formatted[1:]
        if not formatted.endswith(TERMINAL_PUNCTUATION):
            formatted += "."
        return formatted

    def _flush(self, paragraph: str, language: Language, paragraphs: list[str]) -> None:
        if not paragraph:
            return
        formatted = self.format_paragraph(paragraph, language)
        # A fragment made only of separator characters formats to nothing
        if formatted:
            paragraphs.append(formatted)
