"""Health endpoint."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Liveness: responde ok mientras el proceso esté vivo."""
    return {"status": "ok"}
