"""
Static table to cache-name reference data.
Built once at startup and shared read-only across requests.
"""
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Optional

# Insertion order is display order.
DEFAULT_TABLE_CACHES: dict[str, tuple[str, ...]] = {
    "TBCD":   ("MENUCACHE", "APICACHE", "TRANSCACHE"),
    "USERS":  ("USERCACHE", "REGISTRYCACHE"),
    "ORDERS": ("ORDERCACHE",),
}


class CacheKnowledgeBase:
    """Read-only lookup of cache names by (already upper-cased) table name."""

    def __init__(self, table_caches: Mapping[str, Iterable[str]] = DEFAULT_TABLE_CACHES):
        self._entries = MappingProxyType(
            {table: tuple(caches) for table, caches in table_caches.items()}
        )

    @property
    def table_names(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def lookup(self, table_name: str) -> Optional[tuple[str, ...]]:
        """Returns the table's cache names, or None when the table is not known."""
        return self._entries.get(table_name)

    def __contains__(self, table_name: object) -> bool:
        return table_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
