"""
JSON storage for processed books.

Each book lives in its own directory under ``<root>/Books/<book_id>/``
and its text is stored as ``book.json``:

    {
      "title": "...",
      "author": "..." | null,
      "pages": [{"pageNumber": 1, "text": "..."}],
      "paragraphs": ["..."],
      "fullText": "...",
      "language": "tr" | null
    }
"""

from __future__ import annotations

import json
import logging
import shutil
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pocketbook.exceptions import StorageError
from pocketbook.models import ProcessedBook

logger = logging.getLogger(__name__)

BOOKS_DIRECTORY_NAME = "Books"
BOOK_FILE_NAME = "book.json"

BookId = str | uuid.UUID


def book_directory_name(book_id: BookId) -> str:
    """
    Validate a book id and return it as a directory name.

    Raises:
        StorageError: If the id is empty, a relative path component or
            contains a path separator.
    """
    name = str(book_id)
    if not name or name in (".", "..") or "/" in name or "\\" in name or "\0" in name:
        raise StorageError(f"Invalid book id: {name!r}")
    return name


@dataclass(frozen=True)
class StoredBook:
    """A processed book together with its catalog details."""

    title: str
    book: ProcessedBook
    author: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the stored JSON record."""
        return {"title": self.title, "author": self.author, **self.book.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StoredBook:
        """Build from a stored JSON record."""
        return cls(
            title=str(data["title"]),
            author=data.get("author"),
            book=ProcessedBook.from_dict(data),
        )


class BookStorage:
    """
    Persists processed books as JSON files.

    Book ids must be a single directory name; any other id raises
    StorageError before the file system is touched.

    Usage:
        storage = BookStorage("~/PocketBook")
        storage.save(book_id, book, title="Notes")
        stored = storage.load(book_id)  # None if never saved
    """

    def __init__(self, root: str | Path):
        """
        Initialize the storage.

        Args:
            root: Directory holding the ``Books`` folder.
        """
        self.root = Path(root).expanduser()

    def books_directory(self) -> Path:
        """Directory containing one sub-directory per book (created on demand)."""
        path = self.root / BOOKS_DIRECTORY_NAME
        path.mkdir(parents=True, exist_ok=True)
        return path

    def book_directory(self, book_id: BookId) -> Path:
        """Directory of a single book (created on demand)."""
        name = book_directory_name(book_id)
        path = self.books_directory() / name
        path.mkdir(parents=True, exist_ok=True)
        return path

    def book_path(self, book_id: BookId) -> Path:
        """Path of a book's JSON file."""
        return self.book_directory(book_id) / BOOK_FILE_NAME

    def exists(self, book_id: BookId) -> bool:
        """Whether a book has been saved."""
        directory = self.root / BOOKS_DIRECTORY_NAME / book_directory_name(book_id)
        return (directory / BOOK_FILE_NAME).is_file()

    def save(
        self,
        book_id: BookId,
        book: ProcessedBook,
        *,
        title: str,
        author: str | None = None,
    ) -> Path:
        """
        Save a processed book, replacing any previous version.

        Returns:
            Path of the written JSON file.
        """
        record = StoredBook(title=title, author=author, book=book).to_dict()
        path = self.book_path(book_id)
        path.write_text(json.dumps(record, ensure_ascii=False, indent=2), encoding="utf-8")
        logger.debug("Saved book %s (%d pages) to %s", book_id, book.page_count, path)
        return path

    def load(self, book_id: BookId) -> StoredBook | None:
        """
        Load a stored book.

        Returns:
            The stored book, or None if it was never saved.

        Raises:
            StorageError: If the stored record cannot be parsed.
        """
        if not self.exists(book_id):
            return None

        path = self.book_path(book_id)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return StoredBook.from_dict(data)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Corrupt book record {path}: {e}") from e

    def delete(self, book_id: BookId) -> None:
        """Delete a book's directory and everything in it."""
        path = self.root / BOOKS_DIRECTORY_NAME / book_directory_name(book_id)
        if path.exists():
            shutil.rmtree(path)
            logger.debug("Deleted book %s", book_id)
