from __future__ import annotations
from fastapi import APIRouter
from app.routes.analyze import router as analyze_router
from app.routes.export import router as export_router
from app.routes.health import router as health_router
from app.routes.styles import router as styles_router
from app.routes.visuals import router as visuals_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(analyze_router)
router.include_router(visuals_router)
router.include_router(styles_router)
router.include_router(export_router)
