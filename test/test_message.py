from __future__ import annotations

import pytest

from atomized import HTTPMessage, MessageMethod
from atomized.exceptions import HeaderNotFound

from . import make_request


class TestHTTPMessage:
    def test_defaults(self) -> None:
        msg = HTTPMessage()
        assert msg.get_method() is MessageMethod.NONE
        assert msg.is_response()
        assert not msg.is_request()
        assert msg.get_status_code() == 0
        assert msg.get_path() == ""
        assert msg.get_version() == "HTTP/1.1"
        assert msg.get_message_body() == b""
        assert msg.content_length() == 0
        assert len(msg.get_headers()) == 0

    def test_setters_chain(self) -> None:
        msg = HTTPMessage()
        result = (
            msg.set_method(MessageMethod.POST)
            .set_path("/submit")
            .set_version("HTTP/1.0")
            .set_status_code(200)
            .set_status_message("Fine")
            .set_header("Host", "example.com")
            .set_headers({"Accept": "*/*"})
            .set_message_body(b"data")
        )
        assert result is msg
        assert msg.get_method() is MessageMethod.POST
        assert msg.is_request()
        assert msg.get_path() == "/submit"
        assert msg.get_version() == "HTTP/1.0"

    def test_last_write_wins(self) -> None:
        msg = HTTPMessage().set_path("/a").set_path("/b")
        msg.set_header("Host", "a").set_header("Host", "b")
        assert msg.get_path() == "/b"
        assert msg.get_header("Host") == "b"

    def test_constructor_keywords(self) -> None:
        msg = HTTPMessage(
            MessageMethod.PUT,
            path="/x",
            headers={"Host": "example.com"},
            body="hi",
        )
        assert msg.get_method() is MessageMethod.PUT
        assert msg.get_path() == "/x"
        assert msg.get_header("Host") == "example.com"
        assert msg.get_message_body() == b"hi"

    def test_set_headers_merges(self) -> None:
        msg = HTTPMessage().set_header("Host", "a").set_header("Accept", "*/*")
        msg.set_headers({"Host": "b", "Connection": "close"})
        assert msg.get_headers() == {
            "Host": "b",
            "Accept": "*/*",
            "Connection": "close",
        }

    def test_get_missing_header(self) -> None:
        msg = HTTPMessage()
        with pytest.raises(HeaderNotFound):
            msg.get_header("Host")

    def test_get_headers_is_a_copy(self) -> None:
        msg = HTTPMessage().set_header("Host", "example.com")
        headers = msg.get_headers()
        headers["Host"] = "other"
        assert msg.get_header("Host") == "example.com"

    def test_has_and_remove_header(self) -> None:
        msg = HTTPMessage().set_header("Host", "example.com")
        assert msg.has_header("Host")
        assert not msg.has_header("host")
        assert msg.remove_header("Host") is msg
        assert not msg.has_header("Host")
        with pytest.raises(HeaderNotFound):
            msg.remove_header("Host")

    def test_status_message_fallback(self) -> None:
        msg = HTTPMessage().set_status_code(404)
        assert msg.get_status_message() == "Not Found"
        msg.set_status_code(999)
        assert msg.get_status_message() == "Undefined"

    def test_status_message_is_not_cached(self) -> None:
        msg = HTTPMessage().set_status_code(200)
        assert msg.get_status_message() == "OK"
        msg.set_status_code(500)
        assert msg.get_status_message() == "Internal Server Error"

    def test_explicit_status_message(self) -> None:
        msg = HTTPMessage().set_status_code(404).set_status_message("Gone Fishing")
        assert msg.get_status_message() == "Gone Fishing"
        msg.set_status_message("")
        assert msg.get_status_message() == "Not Found"

    @pytest.mark.parametrize("code", [-1, 65536, 100000])
    def test_status_code_out_of_range(self, code: int) -> None:
        with pytest.raises(ValueError):
            HTTPMessage().set_status_code(code)

    @pytest.mark.parametrize("code", [0, 65535])
    def test_status_code_bounds(self, code: int) -> None:
        assert HTTPMessage().set_status_code(code).get_status_code() == code

    @pytest.mark.parametrize("code", ["200", 200.0, True])
    def test_status_code_type(self, code: object) -> None:
        with pytest.raises(TypeError):
            HTTPMessage().set_status_code(code)  # type: ignore[arg-type]

    def test_set_method_type(self) -> None:
        with pytest.raises(TypeError):
            HTTPMessage().set_method("GET")  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "body",
        [b"hello", bytearray(b"hello"), memoryview(b"hello"), "hello"],
    )
    def test_body_types(self, body: bytes | bytearray | memoryview | str) -> None:
        msg = HTTPMessage().set_message_body(body)
        assert msg.get_message_body() == b"hello"
        assert isinstance(msg.get_message_body(), bytes)
        assert msg.content_length() == 5

    def test_text_body_is_utf8(self) -> None:
        msg = HTTPMessage().set_message_body("h\xe9llo")
        assert msg.get_message_body() == b"h\xc3\xa9llo"
        assert msg.content_length() == 6

    def test_body_type_error(self) -> None:
        with pytest.raises(TypeError, match="not expecting type int"):
            HTTPMessage().set_message_body(42)  # type: ignore[arg-type]

    def test_body_is_replaced(self) -> None:
        msg = HTTPMessage().set_message_body(b"first").set_message_body(b"2nd")
        assert msg.get_message_body() == b"2nd"

    def test_equality(self) -> None:
        a = make_request(headers={"A": "1", "B": "2"}, body=b"x")
        b = make_request(headers={"B": "2", "A": "1"}, body=b"x")
        assert a == b
        b.set_path("/other")
        assert a != b
        assert a != "GET / HTTP/1.1"

    def test_equality_uses_resolved_status_message(self) -> None:
        a = HTTPMessage(status_code=404)
        b = HTTPMessage(status_code=404, status_message="Not Found")
        assert a == b

    def test_repr(self) -> None:
        assert repr(make_request(path="/x")) == "<HTTPMessage: 'GET /x HTTP/1.1'>"
        assert repr(HTTPMessage(status_code=204)) == (
            "<HTTPMessage: 'HTTP/1.1 204 No Content'>"
        )


class TestSerialize:
    def test_request(self) -> None:
        msg = make_request(path="/index.html", headers={"Host": "example.com"})
        assert msg.serialize() == (
            b"GET /index.html HTTP/1.1\r\nHost: example.com\r\n\r\n"
        )

    def test_request_without_headers(self) -> None:
        msg = make_request(MessageMethod.HEAD, path="/")
        assert msg.serialize() == b"HEAD / HTTP/1.1\r\n\r\n"

    def test_response_with_default_status_text(self) -> None:
        msg = HTTPMessage().set_status_code(404)
        assert msg.serialize() == b"HTTP/1.1 404 Not Found\r\n\r\n"

    def test_response_with_unknown_status(self) -> None:
        msg = HTTPMessage().set_status_code(999)
        assert msg.serialize() == b"HTTP/1.1 999 Undefined\r\n\r\n"

    def test_response_with_explicit_status_text(self) -> None:
        msg = HTTPMessage().set_status_code(200).set_status_message("All Good")
        assert msg.serialize() == b"HTTP/1.1 200 All Good\r\n\r\n"

    def test_empty_message(self) -> None:
        assert HTTPMessage().serialize() == b"HTTP/1.1 0 Undefined\r\n\r\n"

    def test_headers_in_insertion_order(self) -> None:
        msg = make_request(headers={"Host": "example.com", "Accept": "*/*"})
        msg.set_header("Connection", "close")
        assert msg.serialize() == (
            b"GET / HTTP/1.1\r\n"
            b"Host: example.com\r\n"
            b"Accept: */*\r\n"
            b"Connection: close\r\n"
            b"\r\n"
        )

    def test_body_adds_content_length(self) -> None:
        msg = HTTPMessage().set_status_code(200).set_message_body("Hello world!")
        assert msg.serialize() == (
            b"HTTP/1.1 200 OK\r\nContent-Length: 12\r\n\r\nHello world!"
        )

    def test_empty_body_has_no_content_length(self) -> None:
        msg = make_request(headers={"Host": "example.com"})
        assert b"Content-Length" not in msg.serialize()

    def test_content_length_is_appended_after_user_header(self) -> None:
        msg = make_request(
            MessageMethod.POST, headers={"Content-Length": "99"}, body=b"abc"
        )
        assert msg.serialize() == (
            b"POST / HTTP/1.1\r\n"
            b"Content-Length: 99\r\n"
            b"Content-Length: 3\r\n"
            b"\r\n"
            b"abc"
        )

    def test_inactive_role_fields_are_not_emitted(self) -> None:
        msg = make_request(path="/x").set_status_code(500)
        assert msg.serialize() == b"GET /x HTTP/1.1\r\n\r\n"
        msg.set_method(MessageMethod.NONE)
        assert msg.serialize() == b"HTTP/1.1 500 Internal Server Error\r\n\r\n"

    def test_binary_body_is_verbatim(self) -> None:
        body = bytes(range(256))
        msg = HTTPMessage().set_status_code(200).set_message_body(body)
        wire = msg.serialize()
        assert wire.endswith(b"\r\n\r\n" + body)
        assert b"Content-Length: 256\r\n" in wire

    @pytest.mark.parametrize(
        "msg",
        [
            HTTPMessage().set_header("X-A", "\ud800"),
            make_request(path="/\ud800"),
            HTTPMessage(status_code=200, status_message="\ud800"),
        ],
    )
    def test_lone_surrogate_does_not_raise(self, msg: HTTPMessage) -> None:
        wire = msg.serialize()
        assert b"\xed\xa0\x80" in wire
        assert wire.endswith(b"\r\n\r\n")

    def test_escaped_and_lone_surrogates(self) -> None:
        msg = make_request(headers={"X-A": "\udcff\ud800"})
        assert b"X-A: \xed\xb3\xbf\xed\xa0\x80\r\n" in msg.serialize()

    def test_non_ascii_header(self) -> None:
        msg = make_request(headers={"X-Name": "caf\xe9"})
        assert b"X-Name: caf\xc3\xa9\r\n" in msg.serialize()

    def test_bytes_and_str(self) -> None:
        msg = make_request(headers={"Host": "example.com"}, body=b"hi")
        assert bytes(msg) == msg.serialize()
        assert str(msg) == (
            "GET / HTTP/1.1\r\nHost: example.com\r\nContent-Length: 2\r\n\r\nhi"
        )

    @pytest.mark.parametrize(
        "method",
        [m for m in MessageMethod if m is not MessageMethod.NONE],
    )
    def test_method_names(self, method: MessageMethod) -> None:
        wire = make_request(method, path="/").serialize()
        assert wire.startswith(method.name.encode() + b" / HTTP/1.1\r\n")
