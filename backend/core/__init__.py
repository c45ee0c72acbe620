from core.intent_classifier import Intent, KeywordIntentClassifier, classify_intent  # noqa: F401
from core.table_extractor import extract_table_name, UNKNOWN_TABLE  # noqa: F401
from core.cache_knowledge_base import CacheKnowledgeBase  # noqa: F401
from core.response_composer import compose_response  # noqa: F401
from core.chat_envelope import encode_sse_frame  # noqa: F401
from core.chat_pipeline import ChatPipeline, ChatCompletionResult  # noqa: F401
