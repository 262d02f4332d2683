import pytest
from fastapi.testclient import TestClient
from main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_validate_resolves_disk(client):
    response = client.post(
        "/disk/validate",
        json={
            "volume_mount": {"mount_path": "/data", "disk": {"id": "alpha"}},
            "disks": [{"id": "d1", "name": "alpha"}],
        },
    )
    assert response.status_code == 200
    assert response.json()["disk"]["id"] == "d1"
    assert response.json()["disk"]["index"] is None


def test_validate_not_found(client):
    response = client.post(
        "/disk/validate",
        json={"volume_mount": {"disk": {"id": "missing"}}, "disks": []},
    )
    assert response.status_code == 404
    assert response.json()["kind"] == "NotFound"


def test_validate_missing_disk(client):
    response = client.post("/disk/validate", json={"volume_mount": {}})
    assert response.status_code == 400
    assert response.json()["kind"] == "MissingField"


def test_validate_unknown_mount_type(client):
    response = client.post(
        "/nfs/validate", json={"volume_mount": {"disk": {"index": 0}}}
    )
    assert response.status_code == 404


def test_validate_pod_create(client):
    body = {
        "volume_mount": {"disk": {"index": 0}},
        "input": {"disks": [{"image_id": "img1"}]},
    }
    response = client.post("/disk/validate-pod-create", json=body)
    assert response.status_code == 400
    assert response.json()["kind"] == "MissingField"

    body["volume_mount"]["disk"]["sub_directory"] = "x"
    response = client.post("/disk/validate-pod-create", json=body)
    assert response.status_code == 204


def test_validate_overlay(client):
    response = client.post(
        "/overlay/validate", json={"type": "directory", "lower_dir": ["/"]}
    )
    assert response.status_code == 400
    assert response.json()["kind"] == "InvalidValue"

    response = client.post(
        "/overlay/validate", json={"type": "directory", "lower_dir": ["/a"]}
    )
    assert response.status_code == 204
