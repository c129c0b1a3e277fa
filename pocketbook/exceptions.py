"""
Exception classes for PocketBook.

All PocketBook exceptions inherit from PocketBookError,
making it easy to catch all library errors.

Text processing (language detection, normalization, paragraph
segmentation) never raises: degenerate input yields empty output.
Only the OCR side of the pipeline and storage can fail.

Example:
    >>> try:
    ...     pages = pipeline.extract_and_process(images)
    ... except pocketbook.RecognitionFailed as e:
    ...     print(f"OCR failed: {e}")
    ... except pocketbook.PocketBookError as e:
    ...     print(f"PocketBook error: {e}")
"""


class PocketBookError(Exception):
    """
    Base exception for all PocketBook errors.

    Catch this to handle any PocketBook-specific error.
    """

    pass


class ExtractionError(PocketBookError):
    """
    Raised when text extraction from page images fails.

    A failure aborts the whole batch; no partial page list is returned.
    The caller decides whether to retry the batch.
    """

    pass


class ImageProcessingFailed(ExtractionError):
    """
    Raised when an image cannot be converted into OCR input.

    Example:
        >>> load_image(b"not an image")
        ImageProcessingFailed: Cannot decode image: ...
    """

    pass


class RecognitionFailed(ExtractionError):
    """Raised when the OCR engine reports an internal error."""

    pass


class ExtractionCancelled(ExtractionError):
    """Raised when a batch is aborted through its cancel event."""

    pass


class StorageError(PocketBookError):
    """Raised when a stored book record exists but cannot be read."""

    pass


class ConfigurationError(PocketBookError, ValueError):
    """
    Raised for invalid configuration.

    Example:
        >>> ExtractionConfig(sample_pages=0)
        ConfigurationError: sample_pages must be >= 1, got 0
    """

    pass
