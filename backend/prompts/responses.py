"""
Response templates for the table cache extension.
"""
from langchain_core.prompts import PromptTemplate

# ── GET /greeting ─────────────────────────────────────────────────────────────

GREETING_ENDPOINT_MESSAGE = (
    "Hello! I'm your table cache extension. Ask me about table cache with "
    "@myextension what's the table cache of [TABLE_NAME]"
)

# ── Chat: greeting intent ─────────────────────────────────────────────────────

GREETING_TEMPLATE = """\
Hello! 👋 I'm your Table Cache Extension!

I can help you get information about database table caches. Here's how to use me:

**Available Commands:**
• Just say "hi" or "hello" for this greeting
• Ask "what's the table cache of [TABLE_NAME]" to get cache details

**Example:**
• @my-table-cache-copilot what's the table cache of TBCD
• @my-table-cache-copilot what's the table cache of USERS

**Available Tables:** {known_tables}

What would you like to know about your table caches?"""

greeting_prompt = PromptTemplate(
    input_variables=["known_tables"],
    template=GREETING_TEMPLATE,
)

# ── Chat: unrecognised query ──────────────────────────────────────────────────

HELP_TEMPLATE = """\
I'm not sure what you're asking for. Here's what I can help you with:

**Available Commands:**
• Say "hi" or "hello" for a greeting
• Ask "what's the table cache of [TABLE_NAME]" to get cache information

**Examples:**
• @my-table-cache-copilot hi
• @my-table-cache-copilot what's the table cache of TBCD

**Available Tables:** {known_tables}

Please try one of these commands!"""

help_prompt = PromptTemplate(
    input_variables=["known_tables"],
    template=HELP_TEMPLATE,
)

# ── Chat: table cache lookup ──────────────────────────────────────────────────

CACHE_LISTING_TEMPLATE = """\
Table Cache Information for {table_name}:
{cache_lines}"""

cache_listing_prompt = PromptTemplate(
    input_variables=["table_name", "cache_lines"],
    template=CACHE_LISTING_TEMPLATE,
)

TABLE_NOT_FOUND_TEMPLATE = """\
Table Cache Information for {table_name}:
- Status: Table not found in cache system
- Suggestion: Please check if the table name is correct
- Available cached tables: {known_tables}
- Contact admin if you need to add this table to cache monitoring"""

table_not_found_prompt = PromptTemplate(
    input_variables=["table_name", "known_tables"],
    template=TABLE_NOT_FOUND_TEMPLATE,
)
