"""Health, readiness and stats endpoints."""

from fastapi import APIRouter, HTTPException, Request

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Liveness probe: always returns ok if process is running."""
    return {"status": "ok"}


@router.get("/ready")
def ready(request: Request):
    """Readiness probe: checks the MQTT connection."""
    receiver = request.app.state.receiver
    if not receiver.health_check()["healthy"]:
        raise HTTPException(status_code=503, detail="not ready")
    return {"status": "ready"}


@router.get("/stats")
def stats(request: Request):
    """Router counters and receiver state."""
    return request.app.state.receiver.stats
