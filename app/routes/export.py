from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import Response

from app.routes.deps import parse_request, run_analysis
from app.schemas.inputs import ExportRequest
from app.services.exporter import export_csv, export_json, safe_filename

router = APIRouter(prefix="/export", tags=["export"])


def _attachment(filename: str) -> dict:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.post("/json")
def export_as_json(payload: Any = Body(None)):
    req = parse_request(payload, ExportRequest)
    doc = export_json(run_analysis(req.text), req.filename)
    return Response(
        content=json.dumps(doc, ensure_ascii=False, indent=2),
        media_type="application/json",
        headers=_attachment(f"{doc['filename']}.json"),
    )


@router.post("/csv/{table}")
def export_as_csv(table: str, payload: Any = Body(None)):
    req = parse_request(payload, ExportRequest)
    body = export_csv(run_analysis(req.text), table)
    return Response(
        content=body,
        media_type="text/csv; charset=utf-8",
        headers=_attachment(f"{safe_filename(req.filename)}-{table}.csv"),
    )
