"""
Pytest configuration and fixtures for PocketBook tests.
"""

import threading

import pytest

from pocketbook.exceptions import RecognitionFailed
from pocketbook.ocr.engine import OCREngine, RecognitionConfig


class FakeOCREngine(OCREngine):
    """
    In-memory OCR engine for tests.

    "Images" are keys into a text table. Every call is recorded so tests
    can check the recognition settings each page was read with.
    """

    def __init__(self, texts, fast_texts=None, failing=()):
        self.texts = dict(texts)
        self.fast_texts = dict(fast_texts or {})
        self.failing = set(failing)
        self.calls: list[tuple[object, RecognitionConfig]] = []
        self._lock = threading.Lock()

    def recognize(self, image, config: RecognitionConfig) -> str:
        with self._lock:
            self.calls.append((image, config))
        if image in self.failing:
            raise RecognitionFailed(f"cannot read {image}")
        if config.level.value == "fast" and image in self.fast_texts:
            return self.fast_texts[image]
        return self.texts[image]


@pytest.fixture
def fake_engine_factory():
    """Return the FakeOCREngine class for building per-test engines."""
    return FakeOCREngine


@pytest.fixture(scope="session")
def turkish_pages() -> list[str]:
    """Raw OCR output of three Turkish pages with c, artifacts."""
    return [
        "Bu sabah bir bardak c,ay ve taze simit ile kahvaltı yaptık.\n"
        "Hava çok güzeldi ve bahçede uzun süre oturduk.",
        "Bu kitap bir gün önce geldi ve ben onu hemen okumaya başladım.\n"
        "Yazarın dili sade ve akıcı, konusu da çok ilginç.",
        "Bu akşam yine c,ay demledik ve bir süre sohbet ettik.\n"
        "Sonra herkes odasına çekildi ve ev sustu.",
    ]
