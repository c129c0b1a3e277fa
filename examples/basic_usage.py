#!/usr/bin/env python3
"""
Basic PocketBook Usage Example

This example demonstrates the core workflow:
1. Extract text from scanned page images
2. Assemble a processed book
3. Append a later scan batch
4. Save and load books
"""

import logging
import threading
from pathlib import Path

from pocketbook import (
    BookStorage,
    ExtractionConfig,
    ExtractionPipeline,
    OCRConfig,
    images_from_pdf,
)


def main():
    logging.basicConfig(level=logging.INFO)

    # ─────────────────────────────────────────────────────────────────────────
    # 1. Extraction
    # ─────────────────────────────────────────────────────────────────────────

    # Default configuration: Tesseract, first 3 pages sampled for language
    pipeline = ExtractionPipeline()

    pages = pipeline.extract_and_process(["scans/page1.jpg", "scans/page2.jpg"])
    for page in pages:
        print(f"Page {page.page_number}: {page.text[:80]}...")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Book Assembly
    # ─────────────────────────────────────────────────────────────────────────

    book = pipeline.process(pages)

    print(f"Language: {book.language.value}")
    print(f"  Pages: {book.page_count}")
    print(f"  Paragraphs: {len(book.paragraphs)}")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Appending a Later Scan
    # ─────────────────────────────────────────────────────────────────────────

    # New pages continue the numbering; existing paragraphs are not reflowed
    book = pipeline.append_pages(book, ["scans/page3.jpg"])
    print(f"After append: {book.page_count} pages")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Persistence
    # ─────────────────────────────────────────────────────────────────────────

    storage = BookStorage("~/PocketBook")
    path = storage.save("my-book", book, title="My Book", author="Unknown")
    print(f"Saved to {path}")

    stored = storage.load("my-book")
    print(f"Loaded '{stored.title}' with {stored.book.page_count} pages")


def pdf_example():
    """Extract a scanned PDF with custom settings."""
    config = ExtractionConfig(
        sample_pages=2,  # Detect language from the first two pages
        max_workers=4,  # Parallel OCR threads
        ocr=OCRConfig(extra_tesseract_args="--psm 6"),
    )
    pipeline = ExtractionPipeline(config=config)

    images = images_from_pdf(Path("scans/book.pdf"), dpi=300)
    book = pipeline.extract_book(images)

    for paragraph in book.paragraphs[:3]:
        print(paragraph)


def cancellation_example():
    """Abort a long extraction from another thread."""
    from pocketbook import ExtractionCancelled

    pipeline = ExtractionPipeline()
    cancel = threading.Event()

    # e.g. a UI "Cancel" button calls cancel.set()
    threading.Timer(5.0, cancel.set).start()

    try:
        pipeline.extract_book([f"scans/page{i}.jpg" for i in range(1, 200)], cancel_event=cancel)
    except ExtractionCancelled:
        print("Extraction cancelled; no pages were kept")


if __name__ == "__main__":
    # Note: These examples use placeholder paths.
    # Replace with actual scan paths to run.
    print("PocketBook Usage Examples")
    print("=" * 50)
    print("\nSee the code for detailed examples of:")
    print("  - Page extraction")
    print("  - Book assembly and append")
    print("  - PDF input and configuration")
    print("  - Cancellation")
    print("  - Storage")
