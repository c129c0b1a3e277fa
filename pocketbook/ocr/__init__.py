"""
OCR engine collaborator and image input.

Example:
    >>> from pocketbook.ocr import RecognitionConfig, TesseractOCREngine
    >>> engine = TesseractOCREngine()
    >>> text = engine.recognize("page1.jpg", RecognitionConfig())
"""

from pocketbook.ocr.engine import (
    OCREngine,
    RecognitionConfig,
    RecognitionLevel,
    TesseractOCREngine,
    create_engine,
    tesseract_languages,
)
from pocketbook.ocr.images import (
    ImageSource,
    images_from_pdf,
    load_image,
)

__all__ = [
    # Engine
    "OCREngine",
    "RecognitionConfig",
    "RecognitionLevel",
    "TesseractOCREngine",
    "create_engine",
    "tesseract_languages",
    # Images
    "ImageSource",
    "images_from_pdf",
    "load_image",
]
