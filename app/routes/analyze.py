from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, File, UploadFile

from app.core.errors import AnalyzerError, UnsupportedDocument
from app.routes.deps import parse_request, run_analysis, settings
from app.schemas.inputs import validate_text
from app.services.file_extractor import extract_text_from_upload

router = APIRouter(prefix="/analyze", tags=["analyze"])


@router.post("")
def analyze(payload: Any = Body(None)):
    req = parse_request(payload)
    return run_analysis(req.text).to_wire()


@router.post("/text")
def analyze_text(payload: Any = Body(None)):
    return analyze(payload)


@router.post("/file")
async def analyze_file(file: UploadFile = File(...)):
    raw = await file.read()
    try:
        text, _ = extract_text_from_upload(file.filename or "upload", raw)
    except AnalyzerError:
        raise
    except Exception as e:
        raise UnsupportedDocument(f"Не удалось прочитать файл {file.filename}: {type(e).__name__}") from e
    text = validate_text(text, settings.max_text_length)
    return run_analysis(text).to_wire()
