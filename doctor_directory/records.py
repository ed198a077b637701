"""Record store for the doctor list.

The list is fetched once from a static JSON endpoint and kept verbatim for
the lifetime of the process. A failed fetch leaves the store empty; nothing
is retried and nothing is raised to the caller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import requests

from .config import Config
from .logger import logger


@dataclass(frozen=True)
class DoctorRecord:
    """Read-only view of one doctor entry, tolerant of missing fields."""
    name: str = ""
    specialties: tuple[str, ...] = field(default_factory=tuple)
    mode: str = ""
    fees: Any = None
    experience: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> DoctorRecord:
        if not isinstance(data, dict):
            return cls()
        specialties = data.get("specialties")
        if isinstance(specialties, (list, tuple)):
            specs = tuple(str(s) for s in specialties if s is not None)
        else:
            specs = ()
        name = data.get("name")
        mode = data.get("mode")
        return cls(
            name=name if isinstance(name, str) else "",
            specialties=specs,
            mode=mode if isinstance(mode, str) else "",
            fees=data.get("fees"),
            experience=data.get("experience"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "specialties": list(self.specialties),
            "mode": self.mode,
            "fees": self.fees,
            "experience": self.experience,
        }


class RecordStore:
    """Holds the full, unfiltered doctor list."""

    def __init__(self, url: str | None = None, timeout: float | None = None):
        self.url = url or Config.DATA_SOURCE_URL
        self.timeout = timeout
        self._records: list[Any] = []
        self._loaded = False
        self.last_error: str | None = None

    @classmethod
    def from_records(cls, records: list[Any], url: str = "memory://records") -> RecordStore:
        """Build a store that is already populated (no fetch)."""
        store = cls(url=url)
        store._records = list(records)
        store._loaded = True
        return store

    @property
    def records(self) -> list[Any]:
        return self._records

    @property
    def loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._records)

    def load(self) -> list[Any]:
        """Fetch the record list once. Later calls return the cached list.

        Returns:
            The stored records (empty if the fetch failed)
        """
        if self._loaded:
            return self._records
        # A single attempt, successful or not.
        self._loaded = True

        try:
            resp = requests.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            self.last_error = str(e)
            logger.warning(f"Could not load doctor records from {self.url}: {e}")
            return self._records

        if not isinstance(data, list):
            self.last_error = f"Expected a JSON array, got {type(data).__name__}"
            logger.warning(f"Ignoring doctor records from {self.url}: {self.last_error}")
            return self._records

        self._records = data
        logger.info(f"Loaded {len(data):,} doctor records from {self.url}")
        return self._records


_record_store: RecordStore | None = None


def get_record_store(url: str | None = None, timeout: float | None = None) -> RecordStore:
    """Get the global record store instance (not loaded yet).

    Args:
        url: Data source URL. Defaults to Config.DATA_SOURCE_URL.
        timeout: Fetch timeout in seconds. Defaults to Config.FETCH_TIMEOUT.

    A different url or timeout than the current store's replaces the store.
    """
    global _record_store
    url = url or Config.DATA_SOURCE_URL
    if timeout is None:
        timeout = Config.FETCH_TIMEOUT
    if _record_store is None or _record_store.url != url or _record_store.timeout != timeout:
        _record_store = RecordStore(url, timeout=timeout)
    return _record_store
