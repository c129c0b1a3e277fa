"""
PocketBook: language-aware post-processing of scanned book pages.

This library turns page images of a scanned book or notes into clean,
reflowed text for an e-reader view. It detects the document language,
fixes common OCR errors for that language, and groups the text into
paragraphs.

Example:
    >>> import pocketbook
    >>> pipeline = pocketbook.ExtractionPipeline()
    >>> pages = pipeline.extract_and_process(["page1.jpg", "page2.jpg"])
    >>> book = pipeline.process(pages)
    >>> print(book.language, len(book.paragraphs))

    >>> storage = pocketbook.BookStorage("~/PocketBook")
    >>> storage.save("my-book", book, title="Lecture notes")
"""

from pocketbook.config import ExtractionConfig, OCRConfig
from pocketbook.exceptions import (
    ConfigurationError,
    ExtractionCancelled,
    ExtractionError,
    ImageProcessingFailed,
    PocketBookError,
    RecognitionFailed,
    StorageError,
)
from pocketbook.models import (
    Language,
    PageText,
    ProcessedBook,
)
from pocketbook.ocr import (
    OCREngine,
    RecognitionConfig,
    RecognitionLevel,
    TesseractOCREngine,
    images_from_pdf,
    load_image,
)
from pocketbook.pipeline import ExtractionPipeline, create_pipeline
from pocketbook.storage import BookStorage, StoredBook
from pocketbook.text import (
    LanguageDetector,
    ParagraphSegmenter,
    TextNormalizer,
    detect_language,
    normalize_text,
)

__version__ = "0.1.0"
__all__ = [
    # Pipeline
    "ExtractionPipeline",
    "create_pipeline",
    # Configuration
    "ExtractionConfig",
    "OCRConfig",
    # Models
    "Language",
    "PageText",
    "ProcessedBook",
    # Text processing
    "LanguageDetector",
    "TextNormalizer",
    "ParagraphSegmenter",
    "detect_language",
    "normalize_text",
    # OCR
    "OCREngine",
    "RecognitionConfig",
    "RecognitionLevel",
    "TesseractOCREngine",
    "images_from_pdf",
    "load_image",
    # Storage
    "BookStorage",
    "StoredBook",
    # Exceptions
    "PocketBookError",
    "ExtractionError",
    "ImageProcessingFailed",
    "RecognitionFailed",
    "ExtractionCancelled",
    "StorageError",
    "ConfigurationError",
]
