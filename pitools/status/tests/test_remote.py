from __future__ import annotations

import json

import pytest
import requests

from pitools.errors import DecodeError, TransportError
from pitools.status.services import remote


class FakeResponse:
    def __init__(self, status_code: int = 200, body: bytes = b"") -> None:
        self.status_code = status_code
        self.content = body
        self.text = body.decode("utf-8")


GEO_BODY = {
    "city": "Mountain View",
    "country": {"name": "United States", "code": "US"},
    "location": {"accuracy_radius": 1000, "latitude": 37.751, "longitude": -97.822, "time_zone": "America/Chicago"},
    "ip": "8.8.8.8",
}


def test_external_ip_success(monkeypatch):
    captured = {}

    def fake_get(url, headers, timeout):
        captured.update(url=url, headers=headers, timeout=timeout)
        return FakeResponse(200, b"203.0.113.7\n")

    monkeypatch.setattr("pitools.status.services.remote.requests.get", fake_get)
    ip, err = remote.external_ip_address()
    assert err is None
    assert ip == "203.0.113.7"
    assert captured["url"] == remote.EXTERNAL_IP_URL
    assert captured["headers"]["User-Agent"].startswith("pitools/")
    assert captured["timeout"] == pytest.approx(5.0)


def test_external_ip_http_error(monkeypatch):
    monkeypatch.setattr(
        "pitools.status.services.remote.requests.get",
        lambda url, headers, timeout: FakeResponse(503, b"busy"),
    )
    ip, err = remote.external_ip_address()
    assert ip == "0.0.0.0"
    assert isinstance(err, TransportError)
    assert err.status_code == 503


def test_external_ip_connection_error(monkeypatch):
    def fake_get(*args, **kwargs):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr("pitools.status.services.remote.requests.get", fake_get)
    ip, err = remote.external_ip_address()
    assert ip == "0.0.0.0"
    assert isinstance(err, TransportError)


def test_geo_location(monkeypatch):
    captured = {}

    def fake_get(url, headers, timeout):
        captured["url"] = url
        return FakeResponse(200, json.dumps(GEO_BODY).encode())

    monkeypatch.setattr("pitools.status.services.remote.requests.get", fake_get)
    info, err = remote.geo_location("8.8.8.8")
    assert err is None
    assert captured["url"] == "https://geoip.nekudo.com/api/8.8.8.8"
    assert info.ip == "8.8.8.8"
    assert info.city_name == "Mountain View"
    assert info.country.code == "US"
    assert info.location.latitude == pytest.approx(37.751)
    assert info.location.time_zone == "America/Chicago"


def test_geo_location_city_false_and_missing_fields(monkeypatch):
    body = {"city": False, "country": {"name": "Korea", "code": "KR"}, "ip": "1.2.3.4"}
    monkeypatch.setattr(
        "pitools.status.services.remote.requests.get",
        lambda url, headers, timeout: FakeResponse(200, json.dumps(body).encode()),
    )
    info, err = remote.geo_location("1.2.3.4")
    assert err is None
    assert info.city is False
    assert info.city_name is None
    assert info.location.accuracy_radius == 0


def test_geo_location_decode_error(monkeypatch):
    monkeypatch.setattr(
        "pitools.status.services.remote.requests.get",
        lambda url, headers, timeout: FakeResponse(200, b"<html>oops</html>"),
    )
    info, err = remote.geo_location("8.8.8.8")
    assert isinstance(err, DecodeError)
    assert info == remote.GeoInfo()


def test_geo_location_rejects_numeric_city(monkeypatch):
    body = dict(GEO_BODY, city=42)
    monkeypatch.setattr(
        "pitools.status.services.remote.requests.get",
        lambda url, headers, timeout: FakeResponse(200, json.dumps(body).encode()),
    )
    _, err = remote.geo_location("8.8.8.8")
    assert isinstance(err, DecodeError)


def test_geo_location_transport_error(monkeypatch):
    monkeypatch.setattr(
        "pitools.status.services.remote.requests.get",
        lambda url, headers, timeout: FakeResponse(404, b"not found"),
    )
    _, err = remote.geo_location("8.8.8.8")
    assert isinstance(err, TransportError)
    assert err.status_code == 404


def test_geo_location_null_fields_fall_back_to_defaults(monkeypatch):
    body = {
        "city": "X",
        "country": {"name": None, "code": "US"},
        "location": None,
        "ip": None,
    }
    monkeypatch.setattr(
        "pitools.status.services.remote.requests.get",
        lambda url, headers, timeout: FakeResponse(200, json.dumps(body).encode()),
    )
    info, err = remote.geo_location("1.2.3.4")
    assert err is None
    assert info.city_name == "X"
    assert info.country.name == ""
    assert info.country.code == "US"
    assert info.location == remote.GeoIpLocation()
    assert info.ip == ""


def test_geo_location_rejects_non_ip_without_request(monkeypatch):
    called = False

    def fake_get(*args, **kwargs):
        nonlocal called
        called = True

    monkeypatch.setattr("pitools.status.services.remote.requests.get", fake_get)
    info, err = remote.geo_location("../admin")
    assert isinstance(err, DecodeError)
    assert info == remote.GeoInfo()
    assert called is False
