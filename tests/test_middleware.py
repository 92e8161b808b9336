import pytest

from core.middleware import LinkHeaderMiddleware
from models.settings import Settings

PAGE = b'<html><head><link rel="stylesheet" href="/a.css"></head><body><img src="https://cdn.example.com/b.png"></body></html>'


def make_app(body=PAGE, content_type="text/html; charset=utf-8", extra_headers=None):
    def app(environ, start_response):
        headers = [("Content-Type", content_type), ("Content-Length", str(len(body)))]
        headers.extend(extra_headers or [])
        start_response("200 OK", headers)
        return [body]
    return app


class StartResponse:
    def __init__(self):
        self.status = None
        self.headers = None

    def __call__(self, status, headers, exc_info=None):
        self.status = status
        self.headers = headers
        return lambda data: None

    def values(self, name):
        return [v for k, v in self.headers if k.lower() == name.lower()]


@pytest.fixture
def environ():
    return {
        "REQUEST_METHOD": "GET",
        "SERVER_NAME": "site.test",
        "SERVER_PORT": "443",
        "HTTPS": "on",
        "PATH_INFO": "/blog",
    }


def test_adds_link_header_to_html(environ):
    start_response = StartResponse()
    middleware = LinkHeaderMiddleware(make_app(), Settings())

    body = b"".join(middleware(environ, start_response))

    assert body == PAGE
    assert start_response.status == "200 OK"
    assert start_response.values("Link") == [
        "</a.css>; rel=preload; as=style, <https://cdn.example.com>; rel=preconnect"
    ]


def test_existing_link_header_is_kept(environ):
    start_response = StartResponse()
    app = make_app(extra_headers=[("Link", "</fonts/a.woff2>; rel=preload; as=font")])

    b"".join(LinkHeaderMiddleware(app, Settings())(environ, start_response))

    assert start_response.values("Link") == [
        "</fonts/a.woff2>; rel=preload; as=font",
        "</a.css>; rel=preload; as=style, <https://cdn.example.com>; rel=preconnect",
    ]


def test_non_html_is_passed_through(environ):
    start_response = StartResponse()
    result = [b'{"img": "<img src=\\"/a.png\\">"}']

    def app(environ, start_response):
        start_response("200 OK", [("Content-Type", "application/json")])
        return result

    assert LinkHeaderMiddleware(app, Settings())(environ, start_response) is result
    assert start_response.values("Link") == []


def test_admin_paths_are_skipped(environ):
    environ["PATH_INFO"] = "/administrator/index.php"
    start_response = StartResponse()

    b"".join(LinkHeaderMiddleware(make_app(), Settings())(environ, start_response))

    assert start_response.values("Link") == []


def test_no_header_without_resources(environ):
    start_response = StartResponse()
    app = make_app(body=b"<html><body><p>Hello</p></body></html>")

    b"".join(LinkHeaderMiddleware(app, Settings())(environ, start_response))

    assert start_response.values("Link") == []


def test_lazy_start_response_and_write(environ):
    def app(environ, start_response):
        write = start_response("200 OK", [("Content-Type", "text/html; charset=latin-1")])
        write('<img src="/caf\xe9.png">'.encode("latin-1"))
        return iter([b'<script src="/app.js"></script>'])

    start_response = StartResponse()
    body = b"".join(LinkHeaderMiddleware(app, Settings())(environ, start_response))

    assert body.endswith(b'<script src="/app.js"></script>')
    assert start_response.values("Link") == [
        "</caf.png>; rel=preload; as=image, </app.js>; rel=preload; as=script"
    ]


def test_header_limit_setting(environ):
    page = "".join(f'<img src="/images/{i:04d}.png">' for i in range(500)).encode()
    start_response = StartResponse()

    b"".join(LinkHeaderMiddleware(make_app(body=page), Settings(header_limit=True))(environ, start_response))

    [value] = start_response.values("Link")
    assert len("Link: " + value + "\r\n") <= 8192


def test_app_without_start_response(environ):
    def app(environ, start_response):
        return []

    with pytest.raises(RuntimeError, match="start_response"):
        LinkHeaderMiddleware(app, Settings())(environ, StartResponse())
