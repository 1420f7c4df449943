import pytest

from src.traceit.traceit.main import create_app


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app()
    return app.test_client()


def _body(**overrides):
    body = {
        "timetable": {
            "name": "Sem 4",
            "startDate": "2026-01-05",
            "endDate": "2026-01-19",
            "slots": [{"id": "s1", "day": 0, "startTime": "09:00", "endTime": "10:00", "subject": "CS101"}],
        },
        "records": [
            {"date": "2026-01-05", "slotId": "s1", "status": "attended"},
            {"date": "2026-01-12", "slotId": "s1", "status": "attended"},
        ],
        "now": "2026-01-20T08:00:00",
    }
    body.update(overrides)
    return body


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_settings_defaults(client):
    data = client.get("/api/settings/defaults").get_json()

    assert data["settings"]["targetPercentage"] == 75
    assert data["settings"]["countTeacherAbsentAs"] == "attended"


def test_stats_counts_unmarked_class_as_absent(client):
    resp = client.post("/api/attendance/stats", json=_body())
    data = resp.get_json()

    assert resp.status_code == 200
    assert data["success"] is True
    assert data["overall"] == 66.67
    assert data["subjects"][0]["attended"] == 2
    assert data["subjects"][0]["total"] == 3
    assert data["subjects"][0]["lecture"]["leaves"] == 1
    assert "lab" not in data["subjects"][0]


def test_stats_accepts_legacy_record_keys_and_settings(client):
    body = _body(records={"2026-01-05-s1": "absent"}, settings={"invertedMode": True})

    data = client.post("/api/attendance/stats", json=body).get_json()

    assert data["subjects"][0]["attended"] == 2


def test_projections(client):
    data = client.post("/api/attendance/projections", json=_body(settings={"targetPercentage": 50})).get_json()

    assert data["overall"]["totalInSemester"] == 3
    assert data["overall"]["targetClasses"] == 2
    assert data["overall"]["canMiss"] == 0


def test_report(client):
    data = client.post("/api/attendance/report", json=_body()).get_json()

    assert data["success"] is True
    assert data["timeline"]["daysRemaining"] == 0
    assert len(data["weeklyTrend"]) == 3


@pytest.mark.parametrize(
    "body",
    [
        {"timetable": None},
        {"records": [{"date": "2026-01-05", "slotId": "s1", "status": "late"}]},
        {"settings": {"countMassBunkAs": "sometimes"}},
        {"now": "yesterday"},
    ],
)
def test_invalid_payload_is_400(client, body):
    resp = client.post("/api/attendance/stats", json=_body(**body))

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_non_json_body_is_400(client):
    resp = client.post("/api/attendance/stats", data="nope", content_type="text/plain")

    assert resp.status_code == 400
