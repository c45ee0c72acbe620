"""
Chat envelope codec — wraps reply text as a single chat-completion SSE frame.

Only one ``data:`` frame is ever written and no ``data: [DONE]`` terminator
follows it. Clients that require the terminator are not supported.
"""
from models.chat import ChatCompletionChunk, Choice, Delta

SSE_DATA_PREFIX = b"data: "
SSE_FRAME_TERMINATOR = b"\n\n"


def build_chunk(content: str) -> ChatCompletionChunk:
    return ChatCompletionChunk(
        choices=[Choice(index=0, delta=Delta(role="assistant", content=content), finish_reason="stop")]
    )


def encode_sse_frame(content: str) -> bytes:
    """Serialize ``content`` as ``data: {json}\\n\\n`` (compact, UTF-8 JSON)."""
    payload = build_chunk(content).model_dump_json().encode("utf-8")
    return SSE_DATA_PREFIX + payload + SSE_FRAME_TERMINATOR
