from models.chat import ChatMessage, CopilotUser, ChatCompletionRequest, ChatCompletionChunk  # noqa: F401
from models.chat import GreetingResponse, HealthResponse  # noqa: F401
