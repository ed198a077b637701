from __future__ import annotations

import os


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str) -> float | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


class Config:
    # Read-only record list, fetched once at startup.
    DATA_SOURCE_URL = os.environ.get(
        "DOCTOR_DIRECTORY_DATA_URL",
        "https://srijandubey.github.io/campus-api-mock/SRM-C1-25.json",
    )

    # None means wait indefinitely, like a plain browser fetch.
    FETCH_TIMEOUT = _env_float("DOCTOR_DIRECTORY_FETCH_TIMEOUT")

    LOAD_ON_STARTUP = _env_flag("DOCTOR_DIRECTORY_LOAD_ON_STARTUP", True)

    # Off by default: each control only writes `search` plus its own dimension.
    PRESERVE_UNCHANGED_PARAMS = _env_flag("DOCTOR_DIRECTORY_PRESERVE_PARAMS", False)

    LOG_LEVEL = os.environ.get("DOCTOR_DIRECTORY_LOG_LEVEL", "INFO")

    MAX_SUGGESTIONS = 3

    CONSULT_MODES = ("Video Consult", "In Clinic")

    SORT_OPTIONS = (
        ("fees", "Fees (Low to High)"),
        ("experience", "Experience (High to Low)"),
    )

    SPECIALTIES = (
        "General Physician",
        "Dentist",
        "Dermatologist",
        "Paediatrician",
        "Gynaecologist",
        "ENT",
        "Diabetologist",
        "Cardiologist",
        "Physiotherapist",
        "Endocrinologist",
        "Orthopaedic",
        "Ophthalmologist",
        "Gastroenterologist",
        "Pulmonologist",
        "Psychiatrist",
        "Urologist",
        "Dietitian/Nutritionist",
        "Psychologist",
        "Sexologist",
        "Nephrologist",
        "Neurologist",
        "Oncologist",
        "Ayurveda",
        "Homeopath",
    )
