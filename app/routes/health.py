# app/routes/health.py
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

@router.get("/health", response_class=PlainTextResponse)
async def health_check():
    """Liveness only; the database is not consulted."""
    return "running..."
