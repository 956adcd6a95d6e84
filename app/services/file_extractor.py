from __future__ import annotations

import logging
import os
from io import BytesIO
from typing import Tuple

from docx import Document
from pypdf import PdfReader

from app.core.errors import UnsupportedDocument

logger = logging.getLogger(__name__)

SUPPORTED = {".txt", ".pdf", ".docx"}


def extract_text_from_upload(filename: str, data: bytes) -> Tuple[str, str]:
    ext = os.path.splitext((filename or "").lower())[1]

    if ext not in SUPPORTED:
        raise UnsupportedDocument(f"Неподдерживаемый тип файла: {ext or filename}. Поддерживаются: {sorted(SUPPORTED)}")

    logger.info("Extracting text from %s (%d bytes)", filename, len(data))

    if ext == ".txt":
        return data.decode("utf-8", errors="ignore").strip(), "txt"

    if ext == ".pdf":
        reader = PdfReader(BytesIO(data))
        pages = [p.extract_text() or "" for p in reader.pages]
        return "\n".join(pages).strip(), "pdf"

    doc = Document(BytesIO(data))
    parts = [p.text for p in doc.paragraphs if p.text and p.text.strip()]
    return "\n".join(parts).strip(), "docx"
