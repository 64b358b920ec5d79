"""Health check route shared by every service."""

import time
from fastapi import APIRouter, Request
from pydantic import BaseModel


class HealthResponse(BaseModel):
    service: str
    status: str
    port: int
    timestamp: int


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(request: Request):
    return HealthResponse(
        service=request.app.state.service_name,
        status="healthy",
        port=request.app.state.port,
        timestamp=int(time.time()),
    )
