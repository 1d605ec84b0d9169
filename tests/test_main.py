from fastapi.testclient import TestClient

from villalux.config import settings


def test_root_serves_index(client: TestClient):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "VillaLux" in response.text


def test_static_files_are_served(client: TestClient):
    response = client.get("/index.html")

    assert response.status_code == 200
    assert "<title>VillaLux</title>" in response.text


def test_unknown_static_path_is_404(client: TestClient):
    response = client.get("/missing.css")

    assert response.status_code == 404


def test_cors_allows_any_origin(client: TestClient):
    response = client.get("/api/villas", headers={"Origin": "https://villalux.example"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight(client: TestClient):
    response = client.options(
        "/api/bookings",
        headers={
            "Origin": "https://villalux.example",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        }
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_lifespan_initialises_database(client: TestClient, mock_app_init_db):
    mock_app_init_db.assert_called_once()


def test_root_without_index_is_404(client: TestClient, mocker):
    mocker.patch.object(settings, "INDEX_FILE", "missing.html")

    response = client.get("/")

    assert response.status_code == 404


def test_root_with_missing_static_dir_is_404(client: TestClient, tmp_path, mocker):
    mocker.patch.object(settings, "STATIC_DIR", str(tmp_path / "no-frontend"))

    response = client.get("/")

    assert response.status_code == 404
