from __future__ import annotations

from flask import Blueprint, current_app, jsonify, redirect, render_template, request, url_for

from .data_validation import check_data_source, get_data_health_summary
from .directory import DirectorySession
from .filters import suggest_doctors
from .logger import logger
from .records import DoctorRecord, RecordStore
from .url_state import QueryStringStore, state_to_params

directory_bp = Blueprint("directory", __name__, template_folder="templates")

# Events that rewrite the query string and redirect.
_URL_EVENTS = {"mode", "specialty", "sort"}


def _get_store() -> RecordStore:
    store: RecordStore = current_app.extensions["doctor_directory.records"]
    if not store.loaded:
        store.load()
    return store


def _open_session(args) -> DirectorySession:
    return DirectorySession(
        _get_store(),
        QueryStringStore.from_args(args),
        preserve_params=current_app.config["PRESERVE_UNCHANGED_PARAMS"],
        suggestion_limit=current_app.config["MAX_SUGGESTIONS"],
    )


def _render(session: DirectorySession | None, error: str | None = None):
    if session is None:
        state = None
        cards = []
        suggestions = []
    else:
        state = session.state
        cards = [DoctorRecord.from_dict(d) for d in session.displayed]
        suggestions = [DoctorRecord.from_dict(d) for d in session.suggestions]
    return render_template(
        "directory.html",
        state=state,
        cards=cards,
        suggestions=suggestions,
        consult_modes=current_app.config["CONSULT_MODES"],
        specialties=current_app.config["SPECIALTIES"],
        sort_options=current_app.config["SORT_OPTIONS"],
        error=error,
    )


@directory_bp.route("/health", methods=["GET"])
def health_check():
    """Data source health check endpoint."""
    store = current_app.extensions["doctor_directory.records"]
    status = check_data_source(store)
    status["summary"] = get_data_health_summary(store)
    return jsonify(status)


@directory_bp.route("/", methods=["GET"])
def index():
    try:
        session = _open_session(request.args)
    except Exception as e:
        logger.error(f"Error rendering directory: {str(e)}", exc_info=True)
        return _render(None, error=str(e))
    return _render(session)


@directory_bp.route("/", methods=["POST"])
def handle_event():
    event = request.form.get("event", "")
    value = request.form.get("value", "")
    # The search box travels with every form; it is never read back from the URL here.
    search = request.form.get("search")

    try:
        session = _open_session(request.args)
        if search is not None and event != "search":
            session.state.search_term = search

        logger.info(f"Directory event: event={event}, value={value[:100]}")

        if event == "search":
            session.change_search(search)
        elif event == "suggestion":
            session.select_suggestion(value)
        elif event == "mode":
            session.change_mode(value)
        elif event == "specialty":
            session.toggle_specialty(value, checked=bool(request.form.get("checked")))
        elif event == "sort":
            session.change_sort(value)
        else:
            logger.warning(f"Ignoring unknown directory event: {event!r}")
    except Exception as e:
        logger.error(f"Error in directory event: {str(e)}", exc_info=True)
        return _render(None, error=str(e))

    if event in _URL_EVENTS:
        qs = session.params.query_string
        target = url_for("directory.index")
        return redirect(f"{target}?{qs}" if qs else target)
    return _render(session)


@directory_bp.route("/api/doctors", methods=["GET"])
def api_doctors():
    """Displayed doctors for the filter state in the query string."""
    session = _open_session(request.args)
    return jsonify(
        {
            "count": len(session.displayed),
            "total": len(session.records),
            "filters": state_to_params(session.state),
            "doctors": session.displayed,
        }
    )


@directory_bp.route("/api/suggestions", methods=["GET"])
def api_suggestions():
    query = request.args.get("q", "")
    matches = suggest_doctors(
        _get_store().records, query, limit=current_app.config["MAX_SUGGESTIONS"]
    )
    return jsonify({"query": query, "suggestions": [DoctorRecord.from_dict(d).name for d in matches]})


@directory_bp.route("/api/specialties", methods=["GET"])
def api_specialties():
    return jsonify(list(current_app.config["SPECIALTIES"]))
