from __future__ import annotations

import logging
import zipfile
from io import BytesIO
from typing import Callable, Dict, Iterable, Tuple

import mammoth
import pdfplumber
from pptx import Presentation

from ..errors import DocumentParseError

logger = logging.getLogger(__name__)

_PDF_MAGIC = b"%PDF"
_ZIP_MAGIC = b"PK\x03\x04"


def parse_docx(data: bytes) -> Iterable[Tuple[int, str]]:
    result = mammoth.extract_raw_text(BytesIO(data))
    if result.messages:
        logger.warning("Document conversion warnings: %s", [m.message for m in result.messages])
    text = (result.value or "").strip()
    if text:
        yield 1, text


def parse_pptx(data: bytes) -> Iterable[Tuple[int, str]]:
    presentation = Presentation(BytesIO(data))
    for idx, slide in enumerate(presentation.slides, start=1):
        texts = []
        for shape in slide.shapes:
            if hasattr(shape, "text"):
                content = shape.text.strip()
                if content:
                    texts.append(content)
        if texts:
            yield idx, "\n".join(texts)


def parse_pdf(data: bytes) -> Iterable[Tuple[int, str]]:
    with pdfplumber.open(BytesIO(data)) as pdf:
        for idx, page in enumerate(pdf.pages, start=1):
            text = page.extract_text() or ""
            text = text.strip()
            if text:
                yield idx, text


_PARSERS: Dict[str, Callable[[bytes], Iterable[Tuple[int, str]]]] = {
    "docx": parse_docx,
    "pptx": parse_pptx,
    "pdf": parse_pdf,
}


def detect_format(data: bytes) -> str | None:
    """Sniff the container format from the payload itself."""
    if data.startswith(_PDF_MAGIC):
        return "pdf"
    if data.startswith(_ZIP_MAGIC):
        try:
            with zipfile.ZipFile(BytesIO(data)) as archive:
                names = set(archive.namelist())
        except zipfile.BadZipFile:
            return None
        if "word/document.xml" in names:
            return "docx"
        if "ppt/presentation.xml" in names:
            return "pptx"
    return None


def extract_text(data: bytes) -> str:
    """Return the plain text of an uploaded document."""
    fmt = detect_format(data)
    if fmt is None:
        raise DocumentParseError("Unsupported document type")
    try:
        parts = [text for _, text in _PARSERS[fmt](data)]
    except Exception as exc:
        logger.exception("Error parsing %s document: %s", fmt, exc)
        raise DocumentParseError() from exc
    return "\n\n".join(parts)
