from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from doctor_directory import create_app


def main() -> None:
    app = create_app()

    with app.test_client() as c:
        r = c.get("/directory/")
        assert r.status_code == 200
        print("GET /directory/ OK")

        r = c.post("/directory/", data={"event": "mode", "value": "In Clinic", "search": ""})
        assert r.status_code == 302
        assert "mode=In+Clinic" in r.headers["Location"]
        print("POST mode OK")

        r = c.get("/directory/?mode=In+Clinic&specialty=Dentist&sort=fees")
        assert r.status_code == 200
        print("GET filtered OK")

        r = c.get("/directory/api/doctors?sort=experience")
        assert r.status_code == 200
        print(f"GET api/doctors OK ({r.get_json()['count']} doctors)")

        r = c.get("/directory/api/suggestions?q=a")
        assert r.status_code == 200
        print("GET api/suggestions OK", r.get_json()["suggestions"])

        r = c.get("/directory/health")
        print("Health:", r.get_json()["summary"])

    print("Smoke test OK")


if __name__ == "__main__":
    main()
