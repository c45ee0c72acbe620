"""GET /health — liveness check."""
from fastapi import APIRouter, Request
from models.chat import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request):
    return HealthResponse(status="healthy", service=request.app.state.settings.SERVICE_NAME)
