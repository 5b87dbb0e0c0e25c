"""Prometheus exposition endpoint."""

from fastapi import APIRouter, Request, Response
from prometheus_client.exposition import choose_encoder

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
def metrics(request: Request):
    """Current gauge values, OpenMetrics when the scraper asks for it."""
    encoder, content_type = choose_encoder(request.headers.get("accept"))
    body = encoder(request.app.state.receiver.registry)
    return Response(content=body, headers={"Content-Type": content_type})
