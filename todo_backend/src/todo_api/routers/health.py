from __future__ import annotations

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from ..schemas import HealthOut

router = APIRouter(tags=["health"])


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# PUBLIC_INTERFACE
@router.get("/health", response_model=HealthOut, summary="Health Check")
def health_check(request: Request) -> HealthOut:
    """
    Liveness probe. Reports the current time and the seconds elapsed since
    the application instance was created; never touches the todo store.
    """
    uptime = max(time.monotonic() - request.app.state.started_at, 0.0)
    return HealthOut(status="OK", timestamp=_iso_now(), uptime=uptime)
