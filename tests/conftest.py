from __future__ import annotations

import pytest

from doctor_directory import create_app
from doctor_directory.records import RecordStore


@pytest.fixture
def doctors() -> list[dict]:
    return [
        {"name": "Dr. Asha Rao", "mode": "Video Consult", "specialties": ["Dentist"], "fees": 500, "experience": 5},
        {"name": "Dr. Bhavin Shah", "mode": "In Clinic", "specialties": ["Dentist", "ENT"], "fees": 300, "experience": 10},
        {"name": "Dr. Chitra Iyer", "mode": "In Clinic", "specialties": ["Cardiologist"], "fees": 800, "experience": 15},
        {"name": "Dr. Deepa Nair", "mode": "Video Consult", "specialties": ["Dermatologist", "ENT"], "fees": 300, "experience": 10},
        {"name": "Dr. Arjun Rao", "mode": "In Clinic", "specialties": ["General Physician"], "fees": 200, "experience": 2},
    ]


@pytest.fixture
def store(doctors) -> RecordStore:
    return RecordStore.from_records(doctors)


@pytest.fixture
def app(store):
    app = create_app(record_store=store)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
