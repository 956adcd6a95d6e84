from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body
from pydantic import ValidationError

from app.core.errors import InvalidInput
from app.routes.deps import preferences
from app.services.styles import style_options

router = APIRouter(prefix="/styles", tags=["styles"])


@router.get("")
def get_styles():
    return preferences.get().to_wire()


@router.put("")
def update_styles(payload: Any = Body(None)):
    if not isinstance(payload, dict):
        raise InvalidInput("Настройки стиля должны быть объектом")
    try:
        return preferences.update(payload).to_wire()
    except ValidationError as e:
        raise InvalidInput("Неверные настройки стиля") from e


@router.delete("")
def reset_styles():
    return preferences.reset().to_wire()


@router.get("/options")
def options():
    return style_options()
