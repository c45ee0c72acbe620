"""
Chat pipeline — drives one chat-completion request end to end:
latest user message → intent → table name → cache lookup → reply → SSE frame.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from core.cache_knowledge_base import CacheKnowledgeBase
from core.chat_envelope import encode_sse_frame
from core.intent_classifier import Intent, IntentClassifier, KeywordIntentClassifier
from core.response_composer import compose_response
from core.table_extractor import extract_table_name
from models.chat import ChatCompletionRequest, ChatMessage

logger = logging.getLogger(__name__)

SSE_HEADERS: dict[str, str] = {
    "Content-Type": "text/event-stream",
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "Access-Control-Allow-Origin": "*",
}


@dataclass(frozen=True)
class ChatCompletionResult:
    body: bytes
    headers: dict[str, str] = field(default_factory=lambda: dict(SSE_HEADERS))


def latest_user_message(messages: list[ChatMessage]) -> str:
    """Content of the last user-role message, or "" when there is none."""
    utterance = ""
    for msg in messages:
        if msg.role == "user":
            utterance = msg.content
    return utterance


class ChatPipeline:
    """Stateless request handler; safe to share across worker threads."""

    def __init__(
        self,
        knowledge_base: CacheKnowledgeBase,
        classifier: Optional[IntentClassifier] = None,
    ):
        self.knowledge_base = knowledge_base
        self.classifier = classifier or KeywordIntentClassifier()

    def respond(self, utterance: str) -> str:
        """Reply text for a single utterance."""
        intent = self.classifier.classify(utterance)
        logger.info("Chat intent: %s for message: %s", intent.value, utterance[:80])

        if intent != Intent.CACHE_QUERY:
            return compose_response(intent, known_tables=self.knowledge_base.table_names)

        table_name = extract_table_name(utterance)
        caches = self.knowledge_base.lookup(table_name)
        if caches is None:
            logger.info("Table %s not found in cache knowledge base", table_name)
        return compose_response(
            intent,
            table_name=table_name,
            caches=caches,
            known_tables=self.knowledge_base.table_names,
        )

    def handle(self, request: ChatCompletionRequest) -> ChatCompletionResult:
        utterance = latest_user_message(request.messages)
        logger.info("Received message from %s: %s", request.user.login or "<anonymous>", utterance)
        return ChatCompletionResult(body=encode_sse_frame(self.respond(utterance)))
