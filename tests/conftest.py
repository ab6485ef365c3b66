# tests/conftest.py
from __future__ import annotations
import io
import shutil
import tempfile
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core import config

import fitz  # PyMuPDF
import pytesseract
from PIL import Image

# --------------------------------------------------------------------
# Fixtures for temporary DATA_DIR so tests don't pollute real data dir
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def tmp_data_dir() -> Generator[str, None, None]:
    d = tempfile.mkdtemp(prefix="test-data-")
    yield d
    shutil.rmtree(d, ignore_errors=True)

@pytest.fixture(autouse=True, scope="session")
def patch_data_dir(tmp_data_dir):
    # Override app's DATA_DIR during tests
    config.DATA_DIR = tmp_data_dir

# --------------------------------------------------------------------
# FastAPI test client available as fixture `client`
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app)

# --------------------------------------------------------------------
# Helpers to create in-memory sample PDF and PNG
# --------------------------------------------------------------------
def pdf_bytes(*paragraphs: str) -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    y = 72
    for p in paragraphs:
        page.insert_text((72, y), p, fontsize=11)
        y += 60  # far enough apart to come back as separate blocks
    data = doc.tobytes()
    doc.close()
    return data

def png_bytes() -> bytes:
    img = Image.new("RGB", (120, 40), "white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()

SAMPLE_TEXT = "This is amazing! Click here to learn more. #great"

@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return pdf_bytes(SAMPLE_TEXT)

@pytest.fixture
def sample_png_bytes() -> bytes:
    return png_bytes()

# --------------------------------------------------------------------
# Stub Tesseract so tests never need the binary
# --------------------------------------------------------------------
OCR_TEXT = "Great news!\n\n\n\nJoin us today?  "

@pytest.fixture(autouse=True)
def stub_tesseract(monkeypatch):
    def _fake_to_string(img, lang="eng", **kw):
        return OCR_TEXT

    def _fake_to_data(img, lang="eng", output_type=None, **kw):
        return {
            "text": ["", "Great", "news!", "Join", "us", "today?"],
            "conf": ["-1", "90", "80", "95", "85", "70"],
            "block_num": [0, 1, 1, 2, 2, 2],
        }

    monkeypatch.setattr(pytesseract, "image_to_string", _fake_to_string)
    monkeypatch.setattr(pytesseract, "image_to_data", _fake_to_data)

@pytest.fixture
def make_pdf():
    return pdf_bytes
