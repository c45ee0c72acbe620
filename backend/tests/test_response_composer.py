from core.intent_classifier import Intent
from core.response_composer import compose_response


def test_greeting_lists_commands_and_tables():
    text = compose_response(Intent.GREETING)
    assert text.startswith("Hello! 👋 I'm your Table Cache Extension!")
    assert "**Available Commands:**" in text
    assert "**Available Tables:** TBCD, USERS, ORDERS" in text


def test_help_text_differs_from_greeting():
    text = compose_response(Intent.UNKNOWN)
    assert text.startswith("I'm not sure what you're asking for.")
    assert "**Available Tables:** TBCD, USERS, ORDERS" in text
    assert text != compose_response(Intent.GREETING)


def test_cache_listing():
    text = compose_response(Intent.CACHE_QUERY, "TBCD", ("MENUCACHE", "APICACHE", "TRANSCACHE"))
    assert text == (
        "Table Cache Information for TBCD:\n"
        "- MENUCACHE\n"
        "- APICACHE\n"
        "- TRANSCACHE"
    )


def test_table_not_found():
    text = compose_response(Intent.CACHE_QUERY, "FOO", None)
    assert text == (
        "Table Cache Information for FOO:\n"
        "- Status: Table not found in cache system\n"
        "- Suggestion: Please check if the table name is correct\n"
        "- Available cached tables: TBCD, USERS, ORDERS\n"
        "- Contact admin if you need to add this table to cache monitoring"
    )


def test_known_tables_come_from_caller():
    text = compose_response(Intent.GREETING, known_tables=("ITEMS",))
    assert "**Available Tables:** ITEMS" in text
