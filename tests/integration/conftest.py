import shutil

import pytest


@pytest.fixture(scope="session")
def tesseract_available() -> None:
    if shutil.which("tesseract") is None:
        pytest.skip("Tesseract binary not installed; skipping OCR integration tests")
