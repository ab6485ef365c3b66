import logging
import re
import fitz          # PyMuPDF
import docx          # python-docx
from docx.opc.exceptions import PackageNotFoundError
import pytesseract
from PIL import Image, UnidentifiedImageError
from app.models.job import ExtractionResult

log = logging.getLogger("extract")

_BLANK_RUN = re.compile(r"\n{3,}")


class ExtractionError(RuntimeError):
    ...


def clean_text(text: str) -> str:
    """Trim every line and keep at most one blank line between paragraphs."""
    lines = [line.strip() for line in (text or "").splitlines()]
    return _BLANK_RUN.sub("\n\n", "\n".join(lines)).strip()


def _pdf_blocks(path: str) -> tuple[list[str], dict]:
    paras: list[str] = []
    try:
        with fitz.open(path) as doc:
            for page in doc:
                # 'blocks' yields tuples; index 4 is the text
                for b in page.get_text("blocks") or []:
                    if isinstance(b, (list, tuple)) and len(b) >= 5:
                        # one block is one paragraph; its inner line breaks are layout
                        text = " ".join(l.strip() for l in (b[4] or "").splitlines() if l.strip())
                        if text:
                            paras.append(text)
            meta = {"pages": doc.page_count, "info": {k: v for k, v in (doc.metadata or {}).items() if v}}
    except (RuntimeError, ValueError) as e:  # fitz.FileDataError is a RuntimeError
        raise ExtractionError(f"Could not read PDF: {e}") from e
    return paras, meta


def extract_pdf(path: str) -> ExtractionResult:
    paras, meta = _pdf_blocks(path)
    return ExtractionResult(success=True, text=clean_text("\n\n".join(paras)), metadata=meta)


def extract_docx(path: str) -> ExtractionResult:
    try:
        d = docx.Document(path)
    except (PackageNotFoundError, ValueError, KeyError) as e:
        raise ExtractionError(f"Could not open DOCX: {e}") from e
    paras = [p.text.strip() for p in d.paragraphs if p.text and p.text.strip()]
    return ExtractionResult(
        success=True,
        text=clean_text("\n\n".join(paras)),
        metadata={"paragraphs": len(paras)},
    )


def extract_image(path: str, language: str = "eng") -> ExtractionResult:
    """
    OCR an image with Tesseract. Confidence is the mean word confidence (0-100)
    reported by tesseract; blocks is the number of text blocks it found.
    """
    try:
        with Image.open(path) as img:
            img.load()
            text = pytesseract.image_to_string(img, lang=language)
            data = pytesseract.image_to_data(img, lang=language, output_type=pytesseract.Output.DICT)
    except UnidentifiedImageError as e:
        raise ExtractionError(f"Unreadable image: {e}") from e
    except pytesseract.TesseractNotFoundError as e:
        raise ExtractionError("Tesseract is not installed or not on PATH") from e
    except pytesseract.TesseractError as e:
        raise ExtractionError(f"OCR failed: {e.message}") from e

    words = [
        (float(conf), block)
        for conf, block, word in zip(data.get("conf", []), data.get("block_num", []), data.get("text", []))
        if str(word).strip() and float(conf) >= 0
    ]
    confidence = round(sum(c for c, _ in words) / len(words), 2) if words else 0.0
    return ExtractionResult(
        success=True,
        text=clean_text(text),
        metadata={
            "language": language,
            "confidence": confidence,
            "blocks": len({b for _, b in words}),
        },
    )


def extract_text(path: str, file_type: str, language: str = "eng") -> ExtractionResult:
    """
    Dispatch on file type and never raise: failures come back as
    ExtractionResult(success=False, error=...).
    """
    try:
        if file_type == "pdf":
            return extract_pdf(path)
        if file_type == "docx":
            return extract_docx(path)
        if file_type == "image":
            return extract_image(path, language)
        raise ExtractionError(f"Unsupported file type: {file_type}")
    except (ExtractionError, OSError) as e:
        log.warning("Extraction failed for %s (%s): %s", path, file_type, e)
        return ExtractionResult(success=False, error=str(e))
