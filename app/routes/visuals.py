from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import HTMLResponse

from app.routes.deps import parse_request, preferences, run_analysis
from app.schemas.inputs import VisualRequest
from app.services import visuals

router = APIRouter(prefix="/visuals", tags=["visuals"])


def _build(kind: str, payload: Any) -> visuals.Visual:
    # unknown kinds fail before any analysis runs
    visual_kind = visuals.parse_kind(kind)
    req = parse_request(payload, VisualRequest)
    result = run_analysis(req.text)
    return visuals.render(visual_kind, result, req.style or preferences.get())


@router.post("/suitability")
def suitability(payload: Any = Body(None)):
    req = parse_request(payload)
    return visuals.suitable_kinds(run_analysis(req.text))


@router.post("/overview")
def overview(payload: Any = Body(None)):
    req = parse_request(payload, VisualRequest)
    return visuals.chart_overview(run_analysis(req.text), req.style or preferences.get())


@router.post("/{kind}")
def render_visual(kind: str, payload: Any = Body(None)):
    return _build(kind, payload).model_dump()


@router.post("/{kind}/html", response_class=HTMLResponse)
def render_visual_html(kind: str, payload: Any = Body(None)):
    return HTMLResponse(visuals.render_html(_build(kind, payload)))
