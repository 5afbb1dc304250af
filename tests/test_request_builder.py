from __future__ import annotations

import base64

import pytest


def test_request_for_plain_url_has_single_host_line_without_port() -> None:
    from net_clients.minimal_http.request import build_request
    from net_clients.minimal_http.url import parse_url

    req = build_request(parse_url("http://example.com/foo")).decode()
    assert req.startswith("GET /foo HTTP/1.0\r\n")
    assert req.count("Host: ") == 1
    assert "Host: example.com\r\n" in req
    assert req.endswith("\r\n\r\n")


def test_request_field_order_is_fixed() -> None:
    from net_clients.minimal_http.request import build_request
    from net_clients.minimal_http.url import parse_url

    req = build_request(parse_url("http://example.com/"))
    assert req == (
        b"GET / HTTP/1.0\r\n"
        b"User-Agent: http_minimal_client 1.0\r\n"
        b"Accept: */*\r\n"
        b"Connection: close\r\n"
        b"Host: example.com\r\n"
        b"\r\n"
    )


def test_non_default_port_is_appended_to_host() -> None:
    from net_clients.minimal_http.request import build_request
    from net_clients.minimal_http.url import parse_url

    assert b"Host: example.com:8080\r\n" in build_request(parse_url("http://example.com:8080/"))
    assert b"Host: example.com:80\r\n" in build_request(parse_url("https://example.com:80/"))
    assert b"Host: example.com\r\n" in build_request(parse_url("https://example.com:443/"))


def test_basic_auth_with_password() -> None:
    from net_clients.minimal_http.request import build_request
    from net_clients.minimal_http.url import parse_url

    req = build_request(parse_url("http://u:p@host/")).decode()
    line = next(ln for ln in req.split("\r\n") if ln.startswith("Authorization: "))
    assert line == "Authorization: Basic dTpw"
    assert base64.b64decode(line.rsplit(" ", 1)[1]) == b"u:p"


def test_basic_auth_user_only_has_no_colon() -> None:
    from net_clients.minimal_http.request import build_request
    from net_clients.minimal_http.url import parse_url

    req = build_request(parse_url("http://admin@host/update"))
    encoded = base64.b64encode(b"admin").decode()
    assert f"Authorization: Basic {encoded}\r\n".encode() in req


def test_long_credentials_stay_on_one_line() -> None:
    from net_clients.minimal_http.request import build_request
    from net_clients.minimal_http.url import parse_url

    user = "u" * 200
    req = build_request(parse_url(f"http://{user}:{'p' * 200}@host/")).decode()
    auth = [ln for ln in req.split("\r\n") if ln.startswith("Authorization: Basic ")]
    assert len(auth) == 1
    assert "\n" not in auth[0]


def test_custom_user_agent() -> None:
    from net_clients.minimal_http.request import build_request
    from net_clients.minimal_http.url import parse_url

    req = build_request(parse_url("http://host/"), user_agent="ddns-updater/2")
    assert b"User-Agent: ddns-updater/2\r\n" in req


def test_non_retrievable_url_raises_invalid_url() -> None:
    from net_clients.minimal_http.errors import InvalidURLError
    from net_clients.minimal_http.request import build_request
    from net_clients.minimal_http.url import parse_url

    with pytest.raises(InvalidURLError):
        build_request(parse_url("ftp://host/x"))


def test_invalid_url_message_does_not_leak_password() -> None:
    from net_clients.minimal_http.errors import InvalidURLError
    from net_clients.minimal_http.request import build_request
    from net_clients.minimal_http.url import URL, Scheme

    url = URL(scheme=Scheme.HTTP, user="admin", password="hunter2", host="host", port=80, path=None)
    with pytest.raises(InvalidURLError) as excinfo:
        build_request(url)
    assert "hunter2" not in str(excinfo.value)
