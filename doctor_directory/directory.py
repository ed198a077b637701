"""Interactive directory session.

Wires the record store, the active filter state and the URL parameter
store together. Every mutation re-derives the displayed list in full and
then notifies subscribers. Suggestions follow the search box only.
"""
from __future__ import annotations

from typing import Any, Callable

from .config import Config
from .filters import VALID_SORTS, FilterState, filter_doctors, suggest_doctors
from .records import RecordStore
from .url_state import (
    PARAM_MODE,
    PARAM_SORT,
    PARAM_SPECIALTY,
    ParamStore,
    build_params,
    filter_state_from_params,
)

Listener = Callable[["DirectorySession"], None]


class DirectorySession:
    """Filter/sort/search state for one page view."""

    def __init__(
        self,
        record_store: RecordStore,
        params: ParamStore,
        preserve_params: bool = False,
        suggestion_limit: int | None = None,
    ):
        self.record_store = record_store
        self.params = params
        self.preserve_params = preserve_params
        self.suggestion_limit = Config.MAX_SUGGESTIONS if suggestion_limit is None else suggestion_limit

        self.state: FilterState = filter_state_from_params(params)
        self.displayed: list[Any] = []
        self.suggestions: list[Any] = []
        self._listeners: list[Listener] = []
        self._recompute()

    @property
    def records(self) -> list[Any]:
        return self.record_store.records

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _recompute(self) -> None:
        self.displayed = filter_doctors(self.records, self.state)
        for listener in list(self._listeners):
            listener(self)

    def _write_params(self, updates: dict[str, Any]) -> None:
        self.params.write(
            build_params(
                self.state.search_term,
                updates,
                current=self.state,
                preserve=self.preserve_params,
            )
        )

    def refresh(self) -> None:
        """Re-derive after the record store changed (e.g. finished loading)."""
        self._recompute()

    # --- user interaction handlers -------------------------------------

    def change_search(self, value: str | None) -> None:
        value = value or ""
        self.state.search_term = value
        self.suggestions = suggest_doctors(self.records, value, limit=self.suggestion_limit)
        self._recompute()

    def select_suggestion(self, name: str) -> None:
        self.state.search_term = name
        self.suggestions = []
        self._recompute()

    def change_mode(self, value: str | None) -> None:
        value = value or ""
        self.state.consult_mode = value
        self._write_params({PARAM_MODE: value})
        self._recompute()

    def toggle_specialty(self, value: str, checked: bool) -> None:
        if checked:
            specialties = self.state.specialties + [value]
        else:
            specialties = [s for s in self.state.specialties if s != value]
        # FilterState normalization drops duplicates
        self.state = FilterState(
            search_term=self.state.search_term,
            consult_mode=self.state.consult_mode,
            specialties=specialties,
            sort_option=self.state.sort_option,
        )
        self._write_params({PARAM_SPECIALTY: list(self.state.specialties)})
        self._recompute()

    def change_sort(self, value: str | None) -> None:
        value = value or ""
        self._write_params({PARAM_SORT: value})
        # Unknown values keep their URL form but sort nothing.
        self.state.sort_option = value if value in VALID_SORTS else ""
        self._recompute()
