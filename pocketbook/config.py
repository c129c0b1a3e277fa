"""
Configuration for PocketBook text extraction.

All options have sensible defaults; create a config only when the
defaults need changing.
"""

from dataclasses import dataclass, field
from typing import Literal

from pocketbook.exceptions import ConfigurationError


@dataclass
class OCRConfig:
    """
    Configuration for the OCR engine collaborator.

    Example:
        >>> config = ExtractionConfig(
        ...     ocr=OCRConfig(tesseract_cmd="/opt/homebrew/bin/tesseract")
        ... )
        >>> pipeline = ExtractionPipeline(config=config)
    """

    engine: Literal["tesseract"] = "tesseract"

    # Path to the tesseract binary (None = use PATH)
    tesseract_cmd: str | None = None

    # Fast recognition downsamples images so the long side fits this size
    fast_max_dimension: int = 1000

    # Appended verbatim to the tesseract command line
    extra_tesseract_args: str = ""

    def __post_init__(self):
        """Validate configuration."""
        valid_engines = ("tesseract",)
        if self.engine not in valid_engines:
            raise ConfigurationError(
                f"engine must be one of {valid_engines}, got {self.engine!r}"
            )
        if self.fast_max_dimension < 100:
            raise ConfigurationError(
                f"fast_max_dimension must be >= 100, got {self.fast_max_dimension}"
            )


@dataclass
class ExtractionConfig:
    """
    Configuration for the extraction pipeline.

    Language is detected once per batch from a head sample of the first
    ``sample_pages`` pages (``sample_chars`` characters each) before any
    full-accuracy OCR is dispatched.
    """

    # Language detection sample
    sample_pages: int = 3
    sample_chars: int = 500

    # Worker pool for per-page OCR (None = number of CPU cores)
    max_workers: int | None = None

    ocr: OCRConfig = field(default_factory=OCRConfig)

    def __post_init__(self):
        """Validate configuration."""
        if self.sample_pages < 1:
            raise ConfigurationError(f"sample_pages must be >= 1, got {self.sample_pages}")
        if self.sample_chars < 1:
            raise ConfigurationError(f"sample_chars must be >= 1, got {self.sample_chars}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be >= 1, got {self.max_workers}")
