"""Health probes for the suggester service."""
from fastapi import APIRouter
from pydantic import BaseModel

from suggester import __version__

router = APIRouter(tags=["system"])


class HealthStatus(BaseModel):
    status: str
    version: str = __version__


@router.get("/health", response_model=HealthStatus)
def health_check():
    return HealthStatus(status="ok")


@router.get("/ready", response_model=HealthStatus)
def readiness_check():
    # Static tables are built at import time; nothing external to probe
    return HealthStatus(status="ok")
