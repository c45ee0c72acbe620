from conftest import decode_sse_content
from core.chat_pipeline import ChatPipeline, SSE_HEADERS, latest_user_message
from core.intent_classifier import Intent
from models.chat import ChatCompletionRequest, ChatMessage


def _request(*messages, login="octocat"):
    return ChatCompletionRequest(
        messages=[ChatMessage(role=r, content=c) for r, c in messages],
        user={"login": login},
    )


def test_latest_user_message_picks_last_user_role():
    messages = [
        ChatMessage(role="system", content="be nice"),
        ChatMessage(role="user", content="first"),
        ChatMessage(role="assistant", content="reply"),
        ChatMessage(role="user", content="second"),
        ChatMessage(role="assistant", content="another reply"),
    ]
    assert latest_user_message(messages) == "second"


def test_latest_user_message_empty_when_no_user():
    assert latest_user_message([ChatMessage(role="system", content="hello")]) == ""
    assert latest_user_message([]) == ""


def test_greeting_end_to_end(pipeline):
    content = decode_sse_content(pipeline.handle(_request(("user", "hello"))).body)
    assert "Table Cache Extension" in content
    for table in ("TBCD", "USERS", "ORDERS"):
        assert table in content


def test_cache_query_end_to_end(pipeline):
    result = pipeline.handle(_request(("user", "what's the table cache of ORDERS")))
    assert decode_sse_content(result.body) == "Table Cache Information for ORDERS:\n- ORDERCACHE"
    assert result.headers == SSE_HEADERS


def test_unknown_table_end_to_end(pipeline):
    content = decode_sse_content(pipeline.handle(_request(("user", "what's the table cache of FOO"))).body)
    assert "Table Cache Information for FOO:" in content
    assert "Table not found in cache system" in content
    assert "Available cached tables: TBCD, USERS, ORDERS" in content


def test_no_user_message_yields_help_text(pipeline):
    content = decode_sse_content(pipeline.handle(_request(("system", "hey there"))).body)
    assert content.startswith("I'm not sure what you're asking for.")


def test_only_latest_user_message_counts(pipeline):
    result = pipeline.handle(_request(
        ("user", "hello"),
        ("assistant", "Hi!"),
        ("user", "cache of USERS"),
    ))
    assert decode_sse_content(result.body) == (
        "Table Cache Information for USERS:\n- USERCACHE\n- REGISTRYCACHE"
    )


def test_pipeline_is_idempotent(pipeline):
    req = _request(("user", "what's the table cache of TBCD"))
    assert pipeline.handle(req).body == pipeline.handle(req).body


def test_custom_classifier_is_used(knowledge_base):
    class AlwaysCacheQuery:
        def classify(self, utterance):
            return Intent.CACHE_QUERY

    pipeline = ChatPipeline(knowledge_base, classifier=AlwaysCacheQuery())
    assert pipeline.respond("hi TBCD") == (
        "Table Cache Information for TBCD:\n- MENUCACHE\n- APICACHE\n- TRANSCACHE"
    )
