from __future__ import annotations

from datetime import date

import pytest

from fakes import InMemoryAttendance, InMemoryCourses, InMemoryProfiles, InMemorySchedules
from src.sectrack.sectrack.container import build_services
from src.sectrack.sectrack.main import create_app
from src.sectrack.sectrack.users.model import Profile


@pytest.fixture
def container():
    courses = InMemoryCourses()
    return build_services(
        profiles=InMemoryProfiles(Profile(user_id=1, full_name="Ayşe")),
        courses=courses,
        attendance=InMemoryAttendance(),
        schedules=InMemorySchedules(courses),
    )


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


def _create_course(client, **overrides):
    body = {"name": "Veri Yapıları", "course_code": "YZM202", "t_hours": 3, "u_hours": 2}
    body.update(overrides)
    return client.post("/api/users/1/courses", json=body)


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_create_course_and_mark_absences(client):
    resp = _create_course(client)
    assert resp.status_code == 201
    course_id = resp.get_json()["course"]["id"]

    for day in ("2025-09-15", "2025-09-22", "2025-09-29"):
        r = client.post(
            f"/api/courses/{course_id}/attendance",
            json={"date": day, "type": "T", "hours": 3, "status": "ABSENT"},
        )
        assert r.status_code == 201

    calc = client.get(f"/api/courses/{course_id}/calculation").get_json()["calculation"]
    assert calc["theory"]["max_absent_hours"] == 13
    assert calc["theory"]["remaining_hours"] == 4
    assert calc["theory"]["status"] == "warning"
    assert calc["is_critical"] is False


def test_invalid_course_returns_400(client):
    resp = _create_course(client, t_hours=0, u_hours=0)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_unknown_enum_returns_400(client):
    course_id = _create_course(client).get_json()["course"]["id"]

    resp = client.post(
        f"/api/courses/{course_id}/attendance",
        json={"date": "2025-09-15", "type": "X", "hours": 3, "status": "ABSENT"},
    )

    assert resp.status_code == 400


def test_bad_date_returns_400(client):
    course_id = _create_course(client).get_json()["course"]["id"]

    resp = client.post(
        f"/api/courses/{course_id}/attendance",
        json={"date": "15.09.2025", "type": "T", "hours": 3, "status": "ABSENT"},
    )

    assert resp.status_code == 400


def test_missing_course_returns_404(client):
    assert client.delete("/api/courses/404").status_code == 404
    assert client.get("/api/courses/404/attendance").status_code == 404


def test_patch_record_status(client):
    course_id = _create_course(client).get_json()["course"]["id"]
    record = client.post(
        f"/api/courses/{course_id}/attendance",
        json={"date": "2025-09-15", "type": "U", "hours": 2, "status": "absent"},
    ).get_json()["record"]

    resp = client.patch(f"/api/attendance/{record['id']}", json={"status": "REPORT"})

    assert resp.get_json()["record"]["label"] == "Raporlu"


def test_semester_settings_roundtrip(client):
    unset = client.get("/api/users/1/semester").get_json()["semester"]
    assert unset["current_week"] == 0
    assert unset["semester_end"] is None

    resp = client.put("/api/users/1/semester", json={"semester_start": "2025-09-15"})

    assert resp.status_code == 200
    assert resp.get_json()["semester"]["semester_end"] == "2025-12-22"


def test_dashboard_lists_courses(client, container):
    _create_course(client)
    client.put("/api/users/1/semester", json={"semester_start": date.today().isoformat()})

    body = client.get("/api/users/1/dashboard").get_json()

    assert body["success"] is True
    assert body["semester"]["current_week"] == 1
    assert [c["name"] for c in body["courses"]] == ["Veri Yapıları"]
    assert container.profiles_repo.get_by_user_id(1).last_visit_date == date.today()


def test_slots_and_sync(client):
    course_id = _create_course(client).get_json()["course"]["id"]

    resp = client.post(f"/api/courses/{course_id}/slots", json={"day_of_week": 0, "type": "T", "start_time": "09:00", "end_time": "12:00"})
    assert resp.status_code == 201

    slots = client.get("/api/users/1/slots").get_json()["slots"]
    assert slots[0]["hours"] == 3

    sync = client.post("/api/users/1/sync").get_json()
    assert sync["created"] == 0
    assert sync["last_visit_date"] == date.today().isoformat()

    assert client.delete(f"/api/slots/{slots[0]['id']}").status_code == 200


def test_non_json_body_returns_400(client):
    resp = client.post("/api/users/1/courses", data="not json", content_type="text/plain")

    assert resp.status_code == 400
