"""
Static per-language data used by detection, normalization and segmentation.

All tables are read-only mappings keyed by Language and built once at
import time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType

from pocketbook.models import Language

# =============================================================================
# SCRIPT RANGES
# =============================================================================

# Checked in this order; the first script present decides the language.
SCRIPT_RANGES: tuple[tuple[Language, re.Pattern], ...] = (
    (Language.CHINESE, re.compile(r"[\u4e00-\u9fff]")),
    (Language.JAPANESE, re.compile(r"[\u3040-\u309f\u30a0-\u30ff]")),
    (Language.KOREAN, re.compile(r"[\uac00-\ud7af]")),
    (Language.ARABIC, re.compile(r"[\u0600-\u06ff]")),
    (Language.RUSSIAN, re.compile(r"[\u0400-\u04ff]")),
)

CJK_CHARACTER_CLASS = r"[\u4e00-\u9fff\u3040-\u309f\u30a0-\u30ff\uac00-\ud7af]"


# =============================================================================
# LEXICAL PROFILES (Latin-script languages)
# =============================================================================


@dataclass(frozen=True)
class LexicalProfile:
    """Diacritics and stop-words characteristic of a Latin-script language."""

    special_chars: frozenset[str]
    stop_words: frozenset[str]


def _profile(chars: str, words: str) -> LexicalProfile:
    return LexicalProfile(special_chars=frozenset(chars), stop_words=frozenset(words.split()))


# Iteration order is the tie-break order for lexical scoring.
LEXICAL_PROFILES: MappingProxyType[Language, LexicalProfile] = MappingProxyType(
    {
        Language.TURKISH: _profile(
            "çğıöşüÇĞIİÖŞÜ",
            "bir bu şu ve ile için ama fakat çünkü olan",
        ),
        Language.ENGLISH: _profile(
            "",
            "the and or but in on at to for of with by",
        ),
        Language.SPANISH: _profile(
            "ñáéíóúüÑÁÉÍÓÚÜ",
            "el la de que y a en un es se no te",
        ),
        Language.FRENCH: _profile(
            "àâäçéèêëïîôöùûüÿñæœ",
            "le de et à un il être en avoir que pour",
        ),
        Language.GERMAN: _profile(
            "äöüßÄÖÜ",
            "der die und in den von zu das mit sich des",
        ),
        Language.ITALIAN: _profile(
            "àèéìíîòóùú",
            "il di che e la per un in con da su",
        ),
        Language.PORTUGUESE: _profile(
            "ãâáàçêéèíîóôõú",
            "o de a e do da em um para é com não",
        ),
    }
)


# =============================================================================
# OCR CORRECTION TABLES
# =============================================================================

# Whole-token OCR confusions, applied to every language before the
# language-specific tables. Digits are replaced too (0 -> O, 1 -> I, ...),
# which also rewrites standalone numbers.
WHOLE_TOKEN_FIXES: tuple[tuple[str, str], ...] = (
    ("rn", "m"),
    ("cl", "d"),
    ("vv", "w"),
    ("tl", "d"),
    ("fi", "fl"),
    ("0", "O"),
    ("1", "I"),
    ("5", "S"),
    ("8", "B"),
    ("6", "G"),
)

# Literal find/replace pairs, applied sequentially in the listed order.
LANGUAGE_FIXES: MappingProxyType[Language, tuple[tuple[str, str], ...]] = MappingProxyType(
    {
        Language.TURKISH: (
            ("c,", "ç"),
            ("C,", "Ç"),
            ("g~", "ğ"),
            ("G~", "Ğ"),
            ("i.", "ı"),
            ("I.", "İ"),
            ("o~", "ö"),
            ("O~", "Ö"),
            ("s,", "ş"),
            ("S,", "Ş"),
            ("u~", "ü"),
            ("U~", "Ü"),
            ("ii", "ü"),
            ("ıı", "ü"),
            ("aa", "â"),
        ),
        Language.SPANISH: (
            ("n~", "ñ"),
            ("N~", "Ñ"),
            ("a'", "á"),
            ("e'", "é"),
            ("i'", "í"),
            ("o'", "ó"),
            ("u'", "ú"),
            ("A'", "Á"),
            ("E'", "É"),
            ("I'", "Í"),
            ("O'", "Ó"),
            ("U'", "Ú"),
        ),
        Language.FRENCH: (
            ("a`", "à"),
            ("a^", "â"),
            ("e`", "è"),
            ("e'", "é"),
            ("e^", "ê"),
            ("i^", "î"),
            ("o^", "ô"),
            ("u`", "ù"),
            ("u^", "û"),
            ("c,", "ç"),
        ),
        Language.GERMAN: (
            ('a"', "ä"),
            ('A"', "Ä"),
            ('o"', "ö"),
            ('O"', "Ö"),
            ('u"', "ü"),
            ('U"', "Ü"),
            ("ss", "ß"),
        ),
        Language.ITALIAN: (
            ("a`", "à"),
            ("e`", "è"),
            ("e'", "é"),
            ("i`", "ì"),
            ("i'", "í"),
            ("o`", "ò"),
            ("o'", "ó"),
            ("u`", "ù"),
            ("u'", "ú"),
        ),
        Language.PORTUGUESE: (
            ("a~", "ã"),
            ("a^", "â"),
            ("a'", "á"),
            ("a`", "à"),
            ("e^", "ê"),
            ("e'", "é"),
            ("i'", "í"),
            ("o^", "ô"),
            ("o'", "ó"),
            ("o~", "õ"),
            ("u'", "ú"),
            ("c,", "ç"),
        ),
        # Latin homoglyphs recognized inside Cyrillic text
        Language.RUSSIAN: (
            ("P", "Р"),
            ("p", "р"),
            ("H", "Н"),
            ("h", "н"),
            ("B", "В"),
            ("b", "в"),
            ("C", "С"),
            ("c", "с"),
        ),
    }
)


# =============================================================================
# PARAGRAPHS
# =============================================================================

DEFAULT_MIN_PARAGRAPH_LENGTH = 50

MIN_PARAGRAPH_LENGTHS: MappingProxyType[Language, int] = MappingProxyType(
    {
        Language.CHINESE: 20,
        Language.JAPANESE: 20,
        Language.KOREAN: 20,
        Language.ARABIC: 30,
    }
)


def min_paragraph_length(language: Language) -> int:
    """Fragments shorter than this are merged into the previous paragraph."""
    return MIN_PARAGRAPH_LENGTHS.get(language, DEFAULT_MIN_PARAGRAPH_LENGTH)
