import pytest
from fastapi.testclient import TestClient

from modules.base_convert.tool.app import app


pytestmark = pytest.mark.usefixtures("fresh_strategy")


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("SPARKY_BASE_CONVERT_STRATEGY", "manual")
    return TestClient(app)


def test_index_renders(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Base Converter" in response.text
    assert 'value="16"' in response.text


def test_convert_decimal(client):
    response = client.post("/convert", data={"value": "255", "base_from": "10"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["binary"] == "11111111"
    assert payload["hex"] == "FF"
    assert payload["strategy"] == "manual"


def test_convert_hex_lowercase(client):
    payload = client.post("/convert", data={"value": "2a", "base_from": "hex"}).json()
    assert payload["decimal"] == "42"
    assert payload["binary"] == "101010"


def test_convert_binary_with_overflow_advice(client, monkeypatch):
    monkeypatch.setenv("SPARKY_NATIVE_WORD_BITS", "32")
    payload = client.post("/convert", data={"value": "1" * 32, "base_from": "2"}).json()
    assert payload["decimal"] == "4294967295"
    assert payload["warning"]["triggered"] is True


def test_invalid_digit_is_400(client):
    response = client.post("/convert", data={"value": "102", "base_from": "2"})
    assert response.status_code == 400
    assert response.json()["kind"] == "invalid_digit"


def test_missing_value_is_400(client):
    response = client.post("/convert", data={"base_from": "10"})
    assert response.status_code == 400
    assert response.json()["kind"] == "empty_input"


def test_unknown_base_is_400(client):
    response = client.post("/convert", data={"value": "7", "base_from": "8"})
    assert response.status_code == 400
    assert response.json()["kind"] == "invalid_base"


def test_system_info(client):
    payload = client.get("/system").json()
    assert payload["strategy"] == "manual"
    assert payload["os"] in {"linux", "macos", "windows", "unknown"}
    assert set(payload["bc"]) == {"installed", "path", "version", "install_hint"}
