"""POST /v1/chat/completions — chat-completion endpoint for the Copilot extension."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import StreamingResponse
from pydantic import ValidationError

from core.chat_pipeline import ChatPipeline
from models.chat import ChatCompletionRequest

router = APIRouter()
logger = logging.getLogger(__name__)


def get_pipeline(request: Request) -> ChatPipeline:
    return request.app.state.chat_pipeline


@router.post("/v1/chat/completions")
async def chat_completions(request: Request, pipeline: ChatPipeline = Depends(get_pipeline)):
    raw = await request.body()
    try:
        req = ChatCompletionRequest.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Rejected chat request: %s", e)
        raise HTTPException(status_code=400, detail=f"Invalid JSON: {e}")

    result = pipeline.handle(req)
    return StreamingResponse(iter([result.body]), headers=result.headers)
