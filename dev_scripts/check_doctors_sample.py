from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from doctor_directory.filters import FilterState, filter_doctors, suggest_doctors
from doctor_directory.records import get_record_store


def main() -> None:
    store = get_record_store()
    records = store.load()
    print(f"{len(records)} records from {store.url}")

    state = FilterState(consult_mode="Video Consult", specialties=["Dentist", "ENT"], sort_option="fees")
    for doc in filter_doctors(records, state)[:10]:
        print(f"{doc.get('name')!s:40} {doc.get('mode')!s:15} {doc.get('fees')}")

    print("Suggestions for 'dr':", [d.get("name") for d in suggest_doctors(records, "dr")])


if __name__ == "__main__":
    main()
