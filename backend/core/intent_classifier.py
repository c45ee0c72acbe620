"""
Keyword/substring intent matching over the user's utterance.
"""
from enum import Enum
from typing import Protocol


class Intent(str, Enum):
    GREETING = "greeting"
    CACHE_QUERY = "cache_query"
    UNKNOWN = "unknown"


class IntentClassifier(Protocol):
    def classify(self, utterance: str) -> Intent: ...


class KeywordIntentClassifier:
    """Greeting keywords are checked before cache-query phrases, so greetings win ties."""

    GREETING_KEYWORDS = ("hi", "hello", "hey", "greeting", "greet")
    CACHE_QUERY_PHRASES = ("table cache", "cache of", "cache for")

    def classify(self, utterance: str) -> Intent:
        text = utterance.lower().strip()
        if any(kw in text for kw in self.GREETING_KEYWORDS):
            return Intent.GREETING
        if any(phrase in text for phrase in self.CACHE_QUERY_PHRASES):
            return Intent.CACHE_QUERY
        return Intent.UNKNOWN


_default_classifier = KeywordIntentClassifier()


def classify_intent(utterance: str) -> Intent:
    return _default_classifier.classify(utterance)
