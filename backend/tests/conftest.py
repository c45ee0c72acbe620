import os
import sys

# Add the parent directory (backend) to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import json
import pytest
from fastapi.testclient import TestClient

from main import app
from core.cache_knowledge_base import CacheKnowledgeBase
from core.chat_pipeline import ChatPipeline


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def knowledge_base():
    return CacheKnowledgeBase()


@pytest.fixture
def pipeline(knowledge_base):
    return ChatPipeline(knowledge_base)


def decode_sse_content(body: bytes) -> str:
    """Return delta.content from a single `data: {...}\\n\\n` frame."""
    assert body.startswith(b"data: ")
    assert body.endswith(b"\n\n")
    payload = json.loads(body[len(b"data: "):-2].decode("utf-8"))
    return payload["choices"][0]["delta"]["content"]
