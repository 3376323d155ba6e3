def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_status(client):
    response = client.get("/api/status")
    assert response.status_code == 200
    assert response.json()["message"] == "API is running"


def test_missing_user_header_is_unauthorized(client):
    response = client.get("/api/test-sessions")
    assert response.status_code == 401
    payload = response.json()
    assert payload["error"] == "Unauthorized"
    assert payload["statusCode"] == 401


def test_malformed_session_id(client, auth_headers):
    for path in ["/api/test-sessions/abc", "/api/test-sessions/0", "/api/test-sessions/99999999999999999999"]:
        response = client.get(path, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid session id"

    response = client.delete("/api/test-sessions/1.5", headers=auth_headers)
    assert response.status_code == 400

    too_large = "/api/test-sessions/9223372036854775808"
    for response in [
        client.get(too_large, headers=auth_headers),
        client.put(too_large, json={"label": "x"}, headers=auth_headers),
        client.delete(too_large, headers=auth_headers),
    ]:
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid session id"


def test_unknown_session_is_not_found(client, auth_headers):
    response = client.get("/api/test-sessions/999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"statusCode": 404, "message": "Test session not found", "error": "NotFound"}


def test_schema_errors_use_validation_envelope(client, auth_headers):
    response = client.post(
        "/api/test-sessions",
        json={"measuredAt": "2024-03-15", "measurements": "not-a-list"},
        headers=auth_headers,
    )
    assert response.status_code == 422
    payload = response.json()
    assert payload["error"] == "ValidationError"
    assert payload["details"]["errors"]
