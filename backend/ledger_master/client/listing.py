"""
Supplier list presentation: newest-first ordering and search filtering
"""
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping

SEARCH_COLUMNS = ("Supplier", "PrintName", "Mobile_No", "Mailid", "Contact_person")


def _timestamp(value: Any) -> float:
    """Sort key for LastUpdate; unknown or unparseable times sort last"""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return float("-inf")
    if not isinstance(value, datetime):
        return float("-inf")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def sort_by_last_update(records: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """Records ordered by LastUpdate, newest first"""
    return sorted(records, key=lambda r: _timestamp(r.get("LastUpdate")), reverse=True)


def filter_suppliers(records: Iterable[Mapping[str, Any]], query: str) -> List[Mapping[str, Any]]:
    """Records whose name, print name, mobile, email or contact contain ``query``"""
    needle = (query or "").strip().casefold()
    if not needle:
        return list(records)
    return [
        record for record in records
        if any(needle in str(record.get(column) or "").casefold() for column in SEARCH_COLUMNS)
    ]
