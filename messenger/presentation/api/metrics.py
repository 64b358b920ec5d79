"""
Prometheus Metrics Endpoint.

Test with: curl http://localhost:8001/metrics
"""

from fastapi import APIRouter, Response
from messenger.observability.metrics import get_metrics_content


router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
def metrics():
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
