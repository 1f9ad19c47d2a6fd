"""
File-to-text extraction for captions that arrive as PDFs or screenshots.
Lives outside the analysis engine, which only ever sees the resulting string.
"""

import io
import mimetypes
import os

import pdfplumber
import pytesseract
from PIL import Image


class ExtractionError(RuntimeError):
    pass


def extract_text_from_pdf(data: bytes) -> str:
    pages = []
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        for page in pdf.pages:
            pages.append(page.extract_text() or "")
    return "\n".join(pages).strip()


def extract_text_from_image(data: bytes) -> str:
    tesseract_cmd = os.environ.get("TESSERACT_CMD")
    if tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    with Image.open(io.BytesIO(data)) as img:
        if img.mode not in ("L", "RGB"):
            img = img.convert("RGB")
        text = pytesseract.image_to_string(img, lang="eng")
    return (text or "").strip()


def extract_text(data: bytes, mime_type: str) -> str:
    """
    Returns the text found in a file, or "" for types we do not read.
    Raises ExtractionError when a supported file cannot be parsed.
    """
    mime_type = (mime_type or "").lower()
    try:
        if mime_type == "application/pdf":
            return extract_text_from_pdf(data)
        if mime_type.startswith("image/"):
            return extract_text_from_image(data)
        if mime_type.startswith("text/"):
            return data.decode("utf-8", errors="replace").strip()
    except Exception as e:
        raise ExtractionError(f"Could not read {mime_type} file: {e}") from e
    return ""


def extract_text_from_path(path: str) -> str:
    mime_type, _ = mimetypes.guess_type(path)
    with open(path, "rb") as f:
        data = f.read()
    return extract_text(data, mime_type or "")
