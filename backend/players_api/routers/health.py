import time

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request):
    return {
        "status": "OK",
        "uptime": time.monotonic() - request.app.state.started_at,
        "timestamp": int(time.time() * 1000),
    }
