import pytest


def _body(**overrides):
    body = {"teamA": ["Alice", "Bob"], "teamB": ["Cara", "Dan"], "scoreA": 3, "scoreB": 1}
    body.update(overrides)
    return body


def test_create_match(client, auth):
    res = client.post("/api/matches", json=_body(), headers=auth())
    assert res.status_code == 201
    m = res.get_json()
    assert m["teamA"] == ["Alice", "Bob"]
    assert (m["scoreA"], m["scoreB"]) == (3, 1)
    assert m["ownerId"] == "user-1"
    assert m["date"] is not None


def test_create_with_explicit_date(client, auth):
    res = client.post("/api/matches", json=_body(date="2024-05-01T18:30:00Z"), headers=auth())
    assert res.status_code == 201
    assert res.get_json()["date"].startswith("2024-05-01T18:30:00")


@pytest.mark.parametrize("overrides", [
    {"scoreA": -1},
    {"scoreA": "3"},
    {"scoreB": None},
    {"scoreB": True},
    {"teamA": "Alice"},
    {"teamB": [1, 2]},
    {"date": "yesterday"},
])
def test_create_rejects_invalid_payload(client, auth, overrides):
    res = client.post("/api/matches", json=_body(**overrides), headers=auth())
    assert res.status_code == 400
    assert "error" in res.get_json()


def test_list_most_recent_first(client, auth):
    client.post("/api/matches", json=_body(date="2024-01-01T00:00:00"), headers=auth())
    client.post("/api/matches", json=_body(date="2024-03-01T00:00:00"), headers=auth())
    dates = [m["date"] for m in client.get("/api/matches", headers=auth()).get_json()]
    assert dates == sorted(dates, reverse=True)
    assert len(dates) == 2


def test_get_and_delete_are_owner_scoped(client, auth):
    mid = client.post("/api/matches", json=_body(), headers=auth("alice")).get_json()["id"]

    assert client.get(f"/api/matches/{mid}", headers=auth("bob")).status_code == 404
    assert client.delete(f"/api/matches/{mid}", headers=auth("bob")).status_code == 404
    assert client.get("/api/matches", headers=auth("bob")).get_json() == []

    assert client.get(f"/api/matches/{mid}", headers=auth("alice")).status_code == 200
    res = client.delete(f"/api/matches/{mid}", headers=auth("alice"))
    assert res.get_json() == {"message": "Match deleted"}
    assert client.get(f"/api/matches/{mid}", headers=auth("alice")).status_code == 404


def test_matches_cannot_be_updated(client, auth):
    mid = client.post("/api/matches", json=_body(), headers=auth()).get_json()["id"]
    res = client.put(f"/api/matches/{mid}", json=_body(scoreA=0), headers=auth())
    assert res.status_code == 405
    assert "error" in res.get_json()


@pytest.mark.parametrize("body", [[1, 2], "teamA", 3])
def test_non_object_bodies_are_rejected(client, auth, body):
    res = client.post("/api/matches", json=body, headers=auth())
    assert res.status_code == 400
    assert res.get_json() == {"error": "JSON object body required"}


def test_huge_score_is_rejected(client, auth):
    res = client.post("/api/matches", json=_body(scoreA=2 ** 64), headers=auth())
    assert res.status_code == 400
    assert "scoreA" in res.get_json()["error"]


def test_dates_with_offsets_are_stored_as_utc(client, auth):
    client.post("/api/matches", json=_body(date="2024-01-01T10:00:00+05:00"), headers=auth())
    client.post("/api/matches", json=_body(date="2024-01-01T07:00:00Z"), headers=auth())
    dates = [m["date"] for m in client.get("/api/matches", headers=auth()).get_json()]
    assert dates == ["2024-01-01T07:00:00+00:00", "2024-01-01T05:00:00+00:00"]
