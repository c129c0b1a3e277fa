"""
Image input for the OCR engine.

Page images arrive as PIL images, file paths or encoded bytes, or are
rasterized from a stored book PDF with PyMuPDF.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Union

import fitz  # PyMuPDF
from PIL import Image

from pocketbook.exceptions import ImageProcessingFailed

logger = logging.getLogger(__name__)

ImageSource = Union[Image.Image, str, Path, bytes, bytearray]

# Rendering resolution for PDF pages
DEFAULT_DPI = 200

OCR_MODES = ("RGB", "L")


def load_image(source: ImageSource) -> Image.Image:
    """
    Load an image and convert it into OCR input.

    Args:
        source: PIL image, path to an image file, or encoded image bytes.

    Returns:
        Decoded RGB or grayscale PIL image.

    Raises:
        ImageProcessingFailed: If the image cannot be read or decoded.
    """
    try:
        if isinstance(source, Image.Image):
            image = source
        elif isinstance(source, (bytes, bytearray)):
            image = Image.open(io.BytesIO(source))
        else:
            image = Image.open(Path(source))
        image.load()
    except (OSError, ValueError) as e:
        raise ImageProcessingFailed(f"Cannot decode image: {e}") from e

    if image.mode not in OCR_MODES:
        image = image.convert("RGB")
    return image


def images_from_pdf(path: str | Path, dpi: int = DEFAULT_DPI) -> list[Image.Image]:
    """
    Rasterize every page of a PDF into a PIL image.

    Args:
        path: Path to the PDF file.
        dpi: Rendering resolution.

    Returns:
        One RGB image per page, in page order.

    Raises:
        ImageProcessingFailed: If the PDF cannot be opened or rendered.
    """
    path = Path(path)
    if not path.exists():
        raise ImageProcessingFailed(f"PDF not found: {path}")

    try:
        doc = fitz.open(path)
    except Exception as e:
        raise ImageProcessingFailed(f"Failed to open PDF: {e}") from e

    try:
        scale = dpi / 72.0  # PDF points to pixels
        matrix = fitz.Matrix(scale, scale)
        images = []
        for page in doc:
            pix = page.get_pixmap(matrix=matrix, alpha=False)
            images.append(Image.frombytes("RGB", (pix.width, pix.height), pix.samples))
        logger.debug("Rendered %d pages from %s at %d dpi", len(images), path, dpi)
        return images
    except RuntimeError as e:
        raise ImageProcessingFailed(f"Failed to render PDF {path}: {e}") from e
    finally:
        doc.close()
