"""Health checks for the doctor data source."""
from __future__ import annotations

from typing import Any, Dict

from .records import RecordStore


def check_data_source(store: RecordStore) -> Dict[str, Any]:
    """
    Report whether the record list was fetched and how many records it holds.
    
    Returns:
        Dictionary with status for the data source
    """
    return {
        "url": store.url,
        "loaded": store.loaded,
        "records": len(store),
        "error": store.last_error,
        "ok": store.loaded and store.last_error is None and len(store) > 0,
    }


def get_data_health_summary(store: RecordStore) -> str:
    """Get a human-readable summary of data source health."""
    status = check_data_source(store)

    if not status["loaded"]:
        return "Doctor records have not been requested yet."
    if status["error"]:
        return f"Doctor records could not be loaded from {status['url']}: {status['error']}"
    if not status["records"]:
        return f"The data source at {status['url']} returned no doctor records."
    return f"{status['records']:,} doctor records loaded from {status['url']}."
