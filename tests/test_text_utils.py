from __future__ import annotations


def test_escape_chars_to_hex_only_touches_listed_chars() -> None:
    from net_clients.minimal_http.text_utils import escape_chars_to_hex

    assert escape_chars_to_hex("a b:c", " :") == "a%20b%3Ac"
    assert escape_chars_to_hex("plain/path", " :") == "plain/path"
    assert escape_chars_to_hex("a b", None) == "a b"
    assert escape_chars_to_hex(None, " ") is None


def test_url_escape_set_covers_request_breaking_chars() -> None:
    from net_clients.minimal_http.text_utils import URL_ESCAPE_CHARS, escape_chars_to_hex

    out = escape_chars_to_hex("\r\n \t", URL_ESCAPE_CHARS)
    assert out == "%0D%0A%20%09"


def test_encode_base64_matches_known_values() -> None:
    from net_clients.minimal_http.text_utils import encode_base64

    assert encode_base64("u:p") == "dTpw"
    assert encode_base64("") == ""
    assert encode_base64(None) == ""
    assert encode_base64(b"\xff\x00") == "/wA="
    assert encode_base64("user:pass") == "dXNlcjpwYXNz"


def test_encode_base64_wraps_when_line_size_given() -> None:
    from net_clients.minimal_http.text_utils import encode_base64

    out = encode_base64("x" * 30, line_size=16)
    lines = out.split("\n")
    assert len(lines) == 3
    assert all(len(line) <= 16 for line in lines)
    assert "".join(lines) == encode_base64("x" * 30)
