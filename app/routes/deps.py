from __future__ import annotations

import logging
from typing import Any

from app.core.errors import AnalyzerError, InternalError
from app.core.settings import Settings
from app.schemas.analysis import AnalysisResult
from app.schemas.inputs import AnalyzeTextRequest, parse_payload
from app.services.analyzer import TextAnalyzer
from app.services.store import StylePreferences, build_store

logger = logging.getLogger(__name__)

settings = Settings()
analyzer = TextAnalyzer(settings)
preferences = StylePreferences(build_store(settings.preferences_path))


def run_analysis(text: str) -> AnalysisResult:
    logger.info("Analyzing text of length %d", len(text))
    try:
        return analyzer.analyze(text)
    except AnalyzerError:
        raise
    except Exception as e:
        logger.exception("Text analysis failed")
        raise InternalError() from e


def parse_request(payload: Any, model: type[AnalyzeTextRequest] = AnalyzeTextRequest):
    return parse_payload(payload, model, max_length=settings.max_text_length)
