# app/api/routers/health.py
from fastapi import APIRouter

from app.utils.settings import CATALOG_BACKEND

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok", "backend": CATALOG_BACKEND}
