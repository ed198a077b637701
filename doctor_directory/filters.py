from __future__ import annotations

import math
import numbers
import re
from dataclasses import dataclass, field
from typing import Any, Iterable

import pandas as pd

from .config import Config

SORT_FEES = "fees"
SORT_EXPERIENCE = "experience"
VALID_SORTS = (SORT_FEES, SORT_EXPERIENCE)

_FRAME_COLUMNS = ["name", "mode", "specialties", "fees", "experience"]
_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")


def _normalize_specialties(values: Iterable[str] | None) -> list[str]:
    if not values:
        return []
    # de-dupe while preserving order; matching is exact so no case folding.
    # An empty name is kept: `?specialty=` selects a specialty nobody has.
    seen: set[str] = set()
    out: list[str] = []
    for v in values:
        if v is None:
            continue
        v2 = str(v)
        if v2 in seen:
            continue
        seen.add(v2)
        out.append(v2)
    return out


def _normalize_sort(value: str | None) -> str:
    value = (value or "").strip()
    return value if value in VALID_SORTS else ""


@dataclass
class FilterState:
    """Active search/filter/sort selection."""
    search_term: str = ""
    consult_mode: str = ""
    specialties: list[str] = field(default_factory=list)
    sort_option: str = ""

    def __post_init__(self) -> None:
        self.search_term = self.search_term or ""
        self.consult_mode = self.consult_mode or ""
        self.specialties = _normalize_specialties(self.specialties)
        self.sort_option = _normalize_sort(self.sort_option)

    def has_specialty(self, specialty: str) -> bool:
        return specialty in self.specialties


def _to_number(value: Any) -> float:
    """Numeric sort key; strings such as "₹ 500" yield their first number."""
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        m = _NUMBER_RE.search(value.replace(",", ""))
        if m:
            return float(m.group(0))
    return math.nan


def _records_frame(records: list[Any]) -> pd.DataFrame:
    rows = []
    for rec in records:
        d = rec if isinstance(rec, dict) else {}
        rows.append({c: d.get(c) for c in _FRAME_COLUMNS})
    return pd.DataFrame(rows, columns=_FRAME_COLUMNS)


def _name_matches(name: Any, term_lower: str) -> bool:
    return isinstance(name, str) and term_lower in name.lower()


def _has_any_specialty(value: Any, wanted: list[str]) -> bool:
    if not isinstance(value, (list, tuple)):
        return False
    return any(spec in value for spec in wanted)


def filter_doctors(records: list[Any], state: FilterState) -> list[Any]:
    """
    - search_term: case-insensitive substring of the name; ignored when blank.
    - consult_mode: exact match on mode; ignored when empty.
    - specialties: record must list at least one of them; ignored when empty.
    - Filters are AND-ed, then the result is sorted (stable):
      fees ascending or experience descending. Otherwise original order.
    - Returns the original record objects; records missing a field simply
      fail the predicate that needs it.
    """
    if not records:
        return []

    out = _records_frame(records)

    if state.search_term.strip():
        term = state.search_term.lower()
        mask = out["name"].map(lambda v: _name_matches(v, term)).astype(bool)
        out = out.loc[mask]

    if state.consult_mode:
        mode = state.consult_mode
        mask = out["mode"].map(lambda v: isinstance(v, str) and v == mode).astype(bool)
        out = out.loc[mask]

    wanted = _normalize_specialties(state.specialties)
    if wanted:
        mask = out["specialties"].map(lambda v: _has_any_specialty(v, wanted)).astype(bool)
        out = out.loc[mask]

    if state.sort_option == SORT_FEES:
        key = pd.to_numeric(out["fees"].map(_to_number), errors="coerce")
        out = out.assign(_sort_key=key).sort_values(
            "_sort_key", ascending=True, kind="mergesort", na_position="last"
        )
    elif state.sort_option == SORT_EXPERIENCE:
        key = pd.to_numeric(out["experience"].map(_to_number), errors="coerce")
        out = out.assign(_sort_key=key).sort_values(
            "_sort_key", ascending=False, kind="mergesort", na_position="last"
        )

    return [records[i] for i in out.index]


def suggest_doctors(records: list[Any], raw_input: str | None, limit: int | None = None) -> list[Any]:
    """First `limit` records (full list, original order) whose name contains
    `raw_input` case-insensitively. Blank input gives no suggestions."""
    if raw_input is None or not raw_input.strip():
        return []
    if limit is None:
        limit = Config.MAX_SUGGESTIONS

    term = raw_input.lower()
    out: list[Any] = []
    for rec in records:
        if len(out) >= limit:
            break
        name = rec.get("name") if isinstance(rec, dict) else None
        if _name_matches(name, term):
            out.append(rec)
    return out
