"""
OCR engine collaborator.

The extraction pipeline talks to OCR through the OCREngine interface:
an image plus a RecognitionConfig in, recognized text (lines joined by
newlines) out. TesseractOCREngine is the bundled implementation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

import pytesseract
from PIL import Image

from pocketbook.config import OCRConfig
from pocketbook.exceptions import ConfigurationError, RecognitionFailed
from pocketbook.ocr.images import ImageSource, load_image

logger = logging.getLogger(__name__)


# =============================================================================
# RECOGNITION CONFIG
# =============================================================================


class RecognitionLevel(Enum):
    """Speed/accuracy trade-off of a recognition pass."""

    FAST = "fast"
    ACCURATE = "accurate"


@dataclass(frozen=True)
class RecognitionConfig:
    """Settings for a single recognition call."""

    level: RecognitionLevel = RecognitionLevel.ACCURATE
    languages: tuple[str, ...] = ("en-US",)  # Locale tags, most likely first
    uses_language_correction: bool = True


class OCREngine(ABC):
    """Recognizes text in page images."""

    @abstractmethod
    def recognize(self, image: ImageSource, config: RecognitionConfig) -> str:
        """
        Recognize the text of one image.

        Args:
            image: Page image.
            config: Recognition settings.

        Returns:
            Recognized lines joined by newlines.

        Raises:
            ImageProcessingFailed: If the image cannot be used as OCR input.
            RecognitionFailed: If the engine reports an internal error.
        """


# =============================================================================
# TESSERACT
# =============================================================================

# Locale tag -> Tesseract traineddata name
TESSERACT_LANGUAGES = {
    "tr-TR": "tur",
    "en-US": "eng",
    "es-ES": "spa",
    "fr-FR": "fra",
    "de-DE": "deu",
    "it-IT": "ita",
    "pt-BR": "por",
    "pt-PT": "por",
    "ru-RU": "rus",
    "zh-CN": "chi_sim",
    "zh-TW": "chi_tra",
    "ja-JP": "jpn",
    "ko-KR": "kor",
    "ar-SA": "ara",
}

NO_DICTIONARY_ARGS = "-c load_system_dawg=0 -c load_freq_dawg=0"


def tesseract_languages(locale_tags: tuple[str, ...]) -> str:
    """
    Build a Tesseract ``lang`` argument from locale tags.

    Unknown tags are skipped and duplicates collapsed, keeping order.
    Falls back to English when nothing maps.
    """
    codes: list[str] = []
    for tag in locale_tags:
        code = TESSERACT_LANGUAGES.get(tag)
        if code is None:
            logger.debug("No Tesseract language for locale %s", tag)
        elif code not in codes:
            codes.append(code)
    return "+".join(codes) or "eng"


class TesseractOCREngine(OCREngine):
    """
    OCR engine backed by Tesseract (via pytesseract).

    FAST recognition downsamples the page so its long side fits
    ``fast_max_dimension`` pixels; ACCURATE uses the full image.
    Disabling language correction turns off Tesseract's dictionaries.

    Example:
        >>> engine = TesseractOCREngine()
        >>> engine.recognize("page1.jpg", RecognitionConfig(languages=("tr-TR", "en-US")))
        'Bir varmış bir yokmuş...'
    """

    def __init__(self, config: OCRConfig | None = None):
        self.config = config or OCRConfig()
        if self.config.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self.config.tesseract_cmd

    def recognize(self, image: ImageSource, config: RecognitionConfig) -> str:
        """Recognize the text of one image with Tesseract."""
        page_image = load_image(image)
        if config.level is RecognitionLevel.FAST:
            page_image = self._downscale(page_image)

        lang = tesseract_languages(config.languages)
        options = self._build_options(config)

        try:
            raw = pytesseract.image_to_string(page_image, lang=lang, config=options)
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, RuntimeError) as e:
            raise RecognitionFailed(f"Tesseract recognition failed: {e}") from e

        lines = [line.strip() for line in raw.splitlines()]
        text = "\n".join(line for line in lines if line)
        logger.debug(
            "Recognized %d chars (%s, lang=%s)", len(text), config.level.value, lang
        )
        return text

    def _downscale(self, image: Image.Image) -> Image.Image:
        limit = self.config.fast_max_dimension
        if max(image.size) <= limit:
            return image
        small = image.copy()
        small.thumbnail((limit, limit))
        return small

    def _build_options(self, config: RecognitionConfig) -> str:
        options = []
        if not config.uses_language_correction:
            options.append(NO_DICTIONARY_ARGS)
        if self.config.extra_tesseract_args:
            options.append(self.config.extra_tesseract_args)
        return " ".join(options)


def create_engine(config: OCRConfig | None = None) -> OCREngine:
    """
    Create the OCR engine named in the configuration.

    Raises:
        ConfigurationError: If the engine name is unknown.
    """
    config = config or OCRConfig()
    if config.engine == "tesseract":
        return TesseractOCREngine(config)
    raise ConfigurationError(f"Unknown OCR engine: {config.engine!r}")
