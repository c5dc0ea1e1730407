"""End-to-end tests for the exercise catalog endpoints."""

from __future__ import annotations

import pytest
from tests.helpers.assertions import assert_json_keys, assert_problem
from tests.helpers.http import exercise_payload, exercise_url, json_headers


def _create(client, **overrides) -> dict:
    response = client.post(exercise_url(), json=exercise_payload(**overrides), headers=json_headers())
    assert response.status_code == 201
    return response.get_json()


@pytest.fixture(params=["sql", "memory"])
def api(request, client, memory_client):
    """Run each test against both storage backends."""
    return client if request.param == "sql" else memory_client


class TestExerciseEndpoints:
    def test_list_empty(self, api):
        response = api.get(exercise_url())
        assert response.status_code == 200
        assert response.get_json() == []

    def test_create_returns_body_with_id(self, api):
        body = _create(api)

        assert_json_keys(body, {"id", "name", "notes", "targetMuscles", "preferredRepRanges"})
        assert isinstance(body["id"], int)
        assert body["targetMuscles"] == {"QUADS": 1.0, "GLUTES": 0.5}
        assert body["preferredRepRanges"] == ["THREE_TO_SIX", "FIVE_TO_TEN"]

    def test_create_then_get(self, api):
        created = _create(api, name="Deadlift")

        response = api.get(exercise_url(created["id"]))
        assert response.status_code == 200
        assert response.get_json() == created

    def test_create_ignores_client_id(self, api):
        first = _create(api)
        second = _create(api, id=first["id"])
        assert second["id"] != first["id"]

    def test_update_replaces_and_returns_204(self, api):
        created = _create(api)

        response = api.put(
            exercise_url(created["id"]),
            json={"name": "Box Squat", "targetMuscles": {"GLUTES": "ONE"}},
            headers=json_headers(),
        )
        assert response.status_code == 204
        assert response.data == b""

        got = api.get(exercise_url(created["id"])).get_json()
        assert got == {
            "id": created["id"],
            "name": "Box Squat",
            "notes": "",
            "targetMuscles": {"GLUTES": 1.0},
            "preferredRepRanges": [],
        }

    def test_update_unknown_id_is_204(self, api):
        response = api.put(exercise_url(999), json=exercise_payload(), headers=json_headers())
        assert response.status_code == 204
        assert api.get(exercise_url()).get_json() == []

    def test_delete_soft_deletes(self, api):
        keep = _create(api, name="Keep")
        gone = _create(api, name="Gone")

        response = api.delete(exercise_url(gone["id"]))
        assert response.status_code == 204

        listed = api.get(exercise_url()).get_json()
        assert [item["id"] for item in listed] == [keep["id"]]
        # still readable by id
        assert api.get(exercise_url(gone["id"])).get_json() == gone

    def test_delete_twice_and_unknown_are_204(self, api):
        created = _create(api)
        assert api.delete(exercise_url(created["id"])).status_code == 204
        assert api.delete(exercise_url(created["id"])).status_code == 204
        assert api.delete(exercise_url(31337)).status_code == 204

    def test_get_unknown_is_problem_404(self, api):
        body = assert_problem(api.get(exercise_url(404)), 404, "not_found")
        assert body["detail"] == "Exercise not found: 404"
        assert body["instance"] == exercise_url(404)

    @pytest.mark.parametrize("exercise_id", [-1, 2**31, 2**70])
    def test_out_of_range_ids_are_unknown_ids(self, api, exercise_id):
        created = _create(api)

        body = assert_problem(api.get(exercise_url(exercise_id)), 404, "not_found")
        assert body["detail"] == f"Exercise not found: {exercise_id}"

        put = api.put(exercise_url(exercise_id), json=exercise_payload(name="Other"), headers=json_headers())
        assert put.status_code == 204
        assert api.delete(exercise_url(exercise_id)).status_code == 204

        assert api.get(exercise_url()).get_json() == [created]


class TestValidation:
    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"notes": "no name"}, "name"),
            ({"name": ""}, "name"),
            ({"name": "X", "targetMuscles": {"NECK": 1.0}}, "targetMuscles"),
            ({"name": "X", "targetMuscles": {"QUADS": 0.75}}, "targetMuscles"),
            ({"name": "X", "preferredRepRanges": ["FOREVER"]}, "preferredRepRanges"),
        ],
    )
    def test_create_rejects_invalid_bodies(self, client, payload, field):
        response = client.post(exercise_url(), json=payload, headers=json_headers())
        body = assert_problem(response, 400, "validation_error")
        assert field in body["details"]["errors"]
        assert client.get(exercise_url()).get_json() == []

    def test_update_rejects_invalid_body(self, client):
        created = _create(client)
        response = client.put(exercise_url(created["id"]), json={"name": ""}, headers=json_headers())
        assert_problem(response, 400, "validation_error")
        assert client.get(exercise_url(created["id"])).get_json() == created

    def test_non_json_body_rejected(self, client):
        response = client.post(exercise_url(), data="name=Squat", content_type="text/plain")
        body = assert_problem(response, 400, "validation_error")
        assert "_schema" in body["details"]["errors"]

    def test_unknown_route_is_problem_404(self, client):
        assert_problem(client.get("/api/v1/nope"), 404, "not_found")

    def test_method_not_allowed(self, client):
        assert_problem(client.patch(exercise_url(1), json={}), 405, "method_not_allowed")


class TestCrossCutting:
    def test_request_id_is_echoed(self, client):
        response = client.get(exercise_url(), headers=json_headers(request_id="req-123"))
        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_generated_when_missing(self, client):
        response = client.get(exercise_url())
        assert response.headers.get("X-Request-ID")

    def test_problem_carries_request_id(self, client):
        response = client.get(exercise_url(1), headers=json_headers(request_id="trace-9"))
        body = assert_problem(response, 404, "not_found")
        assert body["request_id"] == "trace-9"

    def test_cors_preflight(self, client):
        response = client.options(
            exercise_url(),
            headers={
                "Origin": "http://planner.example",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] in {"*", "http://planner.example"}
        assert "POST" in response.headers["Access-Control-Allow-Methods"]
