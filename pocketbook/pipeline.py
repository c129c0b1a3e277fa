"""
Extraction pipeline orchestrator.

Two entry points:
- extract_and_process(images): OCR + normalization of a batch of page images
- process(pages): assembly of a ProcessedBook from cleaned pages

Extraction runs in two phases separated by a barrier:
1. Sequential: fast OCR of the first few pages, language detection
2. Parallel: accurate OCR of every page with the detected language's
   hints, each page normalized as soon as its OCR completes

Pages are collected by index, so completion order never affects the
result. Any OCR failure aborts the batch.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, replace

from pocketbook.config import ExtractionConfig
from pocketbook.exceptions import ExtractionCancelled, ExtractionError
from pocketbook.models import PAGE_SEPARATOR, Language, PageText, ProcessedBook
from pocketbook.ocr.engine import OCREngine, RecognitionConfig, RecognitionLevel, create_engine
from pocketbook.ocr.images import ImageSource
from pocketbook.text.detector import LanguageDetector
from pocketbook.text.normalizer import TextNormalizer
from pocketbook.text.paragraphs import ParagraphSegmenter

logger = logging.getLogger(__name__)

# The quick language-detection pass always reads with English hints
SAMPLE_RECOGNITION = RecognitionConfig(
    level=RecognitionLevel.FAST,
    languages=Language.ENGLISH.recognition_languages,
    uses_language_correction=True,
)


@dataclass
class ExtractionPipeline:
    """
    Turns page images into cleaned pages and a processed book.

    Attributes:
        engine: OCR engine (created from config.ocr when not given).
        config: Extraction configuration.
        detector: LanguageDetector shared by both entry points.
        normalizer: TextNormalizer applied to every page.
        segmenter: ParagraphSegmenter used to build paragraphs.

    Example:
        >>> pipeline = ExtractionPipeline()
        >>> pages = pipeline.extract_and_process(["p1.jpg", "p2.jpg"])
        >>> book = pipeline.process(pages)
        >>> book.language
        <Language.TURKISH: 'turkish'>
    """

    engine: OCREngine | None = None
    config: ExtractionConfig = field(default_factory=ExtractionConfig)
    detector: LanguageDetector = field(default_factory=LanguageDetector)
    normalizer: TextNormalizer = field(default_factory=TextNormalizer)
    segmenter: ParagraphSegmenter = field(default_factory=ParagraphSegmenter)

    def __post_init__(self) -> None:
        """Initialize the OCR engine."""
        if self.engine is None:
            self.engine = create_engine(self.config.ocr)

    # -------------------------------------------------------------------------
    # Book assembly
    # -------------------------------------------------------------------------

    def process(self, pages: Iterable[PageText]) -> ProcessedBook:
        """
        Assemble a processed book from cleaned pages.

        The language is detected on the full text (not a head sample) and
        drives paragraph segmentation.

        Args:
            pages: Cleaned pages, in any order.

        Returns:
            ProcessedBook with pages in page-number order.
        """
        ordered = sorted(pages, key=lambda page: page.page_number)
        full_text = PAGE_SEPARATOR.join(page.text for page in ordered)

        language = self.detector.detect(full_text)
        paragraphs = self.segmenter.segment(full_text, language)

        logger.info(
            "Processed %d pages into %d paragraphs (%s)",
            len(ordered),
            len(paragraphs),
            language.value,
        )
        return ProcessedBook(
            pages=tuple(ordered),
            paragraphs=tuple(paragraphs),
            full_text=full_text,
            language=language,
        )

    def append(self, book: ProcessedBook, new_pages: Iterable[PageText]) -> ProcessedBook:
        """
        Append newly extracted pages to an existing book.

        New pages are renumbered to follow the existing ones and only their
        text is segmented; existing paragraphs are kept as they are.

        Args:
            book: Previously processed book.
            new_pages: Cleaned pages of the new scan batch.

        Returns:
            A new ProcessedBook containing old and new content.
        """
        ordered = sorted(new_pages, key=lambda page: page.page_number)
        if not ordered:
            return book

        offset = book.page_count
        renumbered = [
            replace(page, page_number=offset + position)
            for position, page in enumerate(ordered, start=1)
        ]
        new_text = PAGE_SEPARATOR.join(page.text for page in renumbered)

        language = self.detector.detect(new_text)
        new_paragraphs = self.segmenter.segment(new_text, language)

        if book.is_empty:
            full_text = new_text
        else:
            full_text = book.full_text + PAGE_SEPARATOR + new_text

        logger.info(
            "Appended %d pages (%d paragraphs) after page %d",
            len(renumbered),
            len(new_paragraphs),
            offset,
        )
        return ProcessedBook(
            pages=book.pages + tuple(renumbered),
            paragraphs=book.paragraphs + tuple(new_paragraphs),
            full_text=full_text,
            language=book.language if book.language is not Language.UNKNOWN else language,
        )

    # -------------------------------------------------------------------------
    # Extraction
    # -------------------------------------------------------------------------

    def extract_and_process(
        self,
        images: Sequence[ImageSource],
        *,
        start_page: int = 1,
        cancel_event: threading.Event | None = None,
    ) -> list[PageText]:
        """
        OCR and normalize a batch of page images.

        Args:
            images: Page images in reading order.
            start_page: Page number given to the first image.
            cancel_event: Set it to abort the batch.

        Returns:
            Cleaned pages, one per image, in image order.

        Raises:
            ImageProcessingFailed: If an image cannot be used as OCR input.
            RecognitionFailed: If OCR fails on any page.
            ExtractionCancelled: If cancel_event is set before completion.
        """
        images = list(images)
        if not images:
            return []

        logger.info("Extracting text from %d pages", len(images))

        # Phase 1: language is fixed before any full OCR is dispatched
        language = self.detect_language(images[: self.config.sample_pages], cancel_event)
        self._check_cancelled(cancel_event)

        # Phase 2
        recognition = RecognitionConfig(
            level=RecognitionLevel.ACCURATE,
            languages=language.recognition_languages,
            uses_language_correction=True,
        )
        texts = self._extract_pages(images, recognition, language, cancel_event)

        return [
            PageText(page_number=start_page + index, text=texts[index], source_image=image)
            for index, image in enumerate(images)
        ]

    def extract_book(
        self,
        images: Sequence[ImageSource],
        *,
        cancel_event: threading.Event | None = None,
    ) -> ProcessedBook:
        """Extract a batch of page images and assemble the processed book."""
        return self.process(self.extract_and_process(images, cancel_event=cancel_event))

    def append_pages(
        self,
        book: ProcessedBook,
        images: Sequence[ImageSource],
        *,
        cancel_event: threading.Event | None = None,
    ) -> ProcessedBook:
        """Extract newly scanned page images and append them to a book."""
        pages = self.extract_and_process(
            images, start_page=book.page_count + 1, cancel_event=cancel_event
        )
        return self.append(book, pages)

    def detect_language(
        self,
        sample_images: Sequence[ImageSource],
        cancel_event: threading.Event | None = None,
    ) -> Language:
        """
        Detect the batch language from a fast OCR pass over sample pages.

        A sample page that fails OCR is skipped; the full pass will
        report the failure if it persists.

        Raises:
            ExtractionCancelled: If cancel_event is set between sample pages.
        """
        samples = []
        for number, image in enumerate(sample_images, start=1):
            self._check_cancelled(cancel_event)
            try:
                samples.append(self.engine.recognize(image, SAMPLE_RECOGNITION))
            except ExtractionError as e:
                logger.warning("Skipping sample page %d for language detection: %s", number, e)

        language = self.detector.detect_from_samples(
            samples,
            max_samples=self.config.sample_pages,
            sample_chars=self.config.sample_chars,
        )
        logger.info("Detected language: %s", language.value)
        return language

    def _extract_pages(
        self,
        images: list[ImageSource],
        recognition: RecognitionConfig,
        language: Language,
        cancel_event: threading.Event | None,
    ) -> dict[int, str]:
        texts: dict[int, str] = {}
        workers = min(self._max_workers(), len(images))

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures: dict[Future[str], int] = {
                executor.submit(self._extract_page, image, recognition, language): index
                for index, image in enumerate(images)
            }
            try:
                for future in as_completed(futures):
                    self._check_cancelled(cancel_event)
                    texts[futures[future]] = future.result()
            finally:
                # No-op for finished futures; drops queued pages on abort
                for future in futures:
                    future.cancel()

        logger.debug("Extracted %d pages with %d workers", len(texts), workers)
        return texts

    def _extract_page(
        self, image: ImageSource, recognition: RecognitionConfig, language: Language
    ) -> str:
        raw_text = self.engine.recognize(image, recognition)
        return self.normalizer.normalize(raw_text, language)

    def _max_workers(self) -> int:
        return self.config.max_workers or os.cpu_count() or 1

    @staticmethod
    def _check_cancelled(cancel_event: threading.Event | None) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise ExtractionCancelled("Extraction cancelled")


def create_pipeline(
    engine: OCREngine | None = None,
    config: ExtractionConfig | None = None,
) -> ExtractionPipeline:
    """
    Create an extraction pipeline.

    Args:
        engine: OCR engine to use (default: built from config.ocr).
        config: Extraction configuration (default: ExtractionConfig()).

    Returns:
        Configured ExtractionPipeline.
    """
    return ExtractionPipeline(engine=engine, config=config or ExtractionConfig())
