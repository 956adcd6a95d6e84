from typing import Any

from pydantic import BaseModel, Field

from app.core.errors import InvalidInput, TooLong
from app.schemas.styles import StyleSettings


class AnalyzeTextRequest(BaseModel):
    text: str = Field(min_length=1)


class VisualRequest(AnalyzeTextRequest):
    style: StyleSettings | None = None


class ExportRequest(AnalyzeTextRequest):
    filename: str = "infographic"


def validate_text(text: Any, max_length: int = 5000) -> str:
    """Accept only a non-empty string no longer than ``max_length``."""
    if not isinstance(text, str) or not text:
        raise InvalidInput()
    if len(text) > max_length:
        raise TooLong(max_length)
    return text


def parse_payload(payload: Any, model: type[AnalyzeTextRequest], max_length: int = 5000):
    """Validate a raw JSON body into ``model``.

    The ``text`` field is checked first so both bad-shape and over-length inputs
    map to the fixed API errors instead of a generic 422.
    """
    if not isinstance(payload, dict):
        raise InvalidInput()
    validate_text(payload.get("text"), max_length)
    try:
        return model.model_validate(payload)
    except ValueError as e:
        raise InvalidInput() from e
