"""Query-string state for the directory page.

Filter state is seeded from the URL once, and written back whenever the
consultation mode, a specialty, or the sort option changes. Typing in the
search box never rewrites the URL.
"""
from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import parse_qsl, urlencode

from .filters import FilterState
from .logger import logger

PARAM_SEARCH = "search"
PARAM_MODE = "mode"
PARAM_SPECIALTY = "specialty"
PARAM_SORT = "sort"

# Order keys are written in.
_DIMENSIONS = (PARAM_MODE, PARAM_SPECIALTY, PARAM_SORT)


class ParamStore:
    """Persisted key/value state bound to a page URL."""

    def read(self, key: str) -> str | None:
        raise NotImplementedError

    def read_all(self, key: str) -> list[str]:
        raise NotImplementedError

    def write(self, params: Mapping[str, Any]) -> None:
        """Replace every stored parameter with `params`."""
        raise NotImplementedError


class QueryStringStore(ParamStore):
    """In-memory parameter store backed by a URL query string."""

    def __init__(self, query: str = ""):
        self._pairs: list[tuple[str, str]] = parse_qsl(query.lstrip("?"), keep_blank_values=True)
        self.writes = 0

    @classmethod
    def from_args(cls, args: Any) -> QueryStringStore:
        """Build from a Werkzeug MultiDict (e.g. Flask's request.args)."""
        store = cls()
        store._pairs = [(k, v) for k, values in args.lists() for v in values]
        return store

    def read(self, key: str) -> str | None:
        for k, v in self._pairs:
            if k == key:
                return v
        return None

    def read_all(self, key: str) -> list[str]:
        return [v for k, v in self._pairs if k == key]

    def write(self, params: Mapping[str, Any]) -> None:
        pairs: list[tuple[str, str]] = []
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                pairs.extend((key, str(v)) for v in value)
            else:
                pairs.append((key, str(value)))
        self._pairs = pairs
        self.writes += 1
        logger.debug(f"Query string rewritten: {self.query_string}")

    @property
    def query_string(self) -> str:
        return urlencode(self._pairs)

    def items(self) -> list[tuple[str, str]]:
        return list(self._pairs)


def filter_state_from_params(store: ParamStore) -> FilterState:
    """Seed filter state from `search`, `mode`, repeated `specialty` and `sort`."""
    return FilterState(
        search_term=store.read(PARAM_SEARCH) or "",
        consult_mode=store.read(PARAM_MODE) or "",
        specialties=store.read_all(PARAM_SPECIALTY),
        sort_option=store.read(PARAM_SORT) or "",
    )


def _dimension_value(state: FilterState, key: str) -> Any:
    if key == PARAM_MODE:
        return state.consult_mode
    if key == PARAM_SPECIALTY:
        return list(state.specialties)
    return state.sort_option


def build_params(
    search_term: str,
    updates: Mapping[str, Any],
    current: FilterState | None = None,
    preserve: bool = False,
) -> dict[str, Any]:
    """
    Parameters to write after a mode/specialty/sort change.

    - `search` is included only when non-empty.
    - Dimensions named in `updates` are written as given, even when empty.
    - Other dimensions are dropped unless `preserve` is set, in which case
      their non-empty values are taken from `current`.
    """
    params: dict[str, Any] = {}
    if search_term:
        params[PARAM_SEARCH] = search_term
    for key in _DIMENSIONS:
        if key in updates:
            params[key] = updates[key]
        elif preserve and current is not None:
            value = _dimension_value(current, key)
            if value:
                params[key] = value
    return params


def state_to_params(state: FilterState) -> dict[str, Any]:
    """Full snapshot of a state as query parameters, empty values omitted."""
    return build_params(state.search_term, {}, current=state, preserve=True)
