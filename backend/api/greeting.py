"""GET / and GET /greeting — static greeting for the extension landing page."""
from fastapi import APIRouter

from models.chat import GreetingResponse
from prompts.responses import GREETING_ENDPOINT_MESSAGE

router = APIRouter()


@router.get("/", response_model=GreetingResponse)
@router.get("/greeting", response_model=GreetingResponse)
def greeting():
    return GreetingResponse(message=GREETING_ENDPOINT_MESSAGE)
