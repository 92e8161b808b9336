"""WSGI middleware that announces the resources of rendered HTML pages."""
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from config.settings_loader import load_settings
from core.context import RequestContext, WSGIEnviron, is_admin_path
from core.pipeline import LinkHeaderPipeline
from models.settings import Settings

logger = logging.getLogger(__name__)

Headers = List[Tuple[str, str]]


class LinkHeaderMiddleware:
    """Add a 'Link' header with preload and preconnect hints to HTML responses.

    Existing 'Link' headers set by the application are kept; the generated
    one is appended next to them. Back-office paths and non-HTML responses
    are passed through untouched.
    """

    def __init__(self, app: Callable, settings: Optional[Settings] = None):
        self.app = app
        self.settings = settings or load_settings()
        self.pipeline = LinkHeaderPipeline.from_settings(self.settings)

    def __call__(self, environ: WSGIEnviron, start_response: Callable) -> Iterable[bytes]:
        context = RequestContext.from_environ(environ)
        if is_admin_path(context.path, self.settings.admin_path_prefixes):
            logger.debug(f"Skipping admin path {context.path}")
            return self.app(environ, start_response)

        response: Dict[str, Any] = {}
        written: List[bytes] = []

        def capture(status: str, headers: Headers, exc_info=None):
            response["status"] = status
            response["headers"] = list(headers)
            response["exc_info"] = exc_info
            return written.append

        result = self.app(environ, capture)

        # Stream non-HTML responses as they are when the headers are already known
        if "status" in response and not written and not _is_html(response["headers"]):
            start_response(response["status"], response["headers"], response["exc_info"])
            return result

        try:
            body = b"".join(written) + b"".join(result)
        finally:
            if hasattr(result, "close"):
                result.close()

        if "status" not in response:
            raise RuntimeError("WSGI application returned without calling start_response")

        headers = response["headers"]
        if _is_html(headers):
            html = body.decode(_charset(headers), errors="replace")
            value = self.pipeline.run(html, context.origin, context.default_scheme, self.settings.header_limit)
            if value:
                headers.append(("Link", value))
                logger.debug(f"Added Link header ({len(value)} bytes) to {context.path}")

        start_response(response["status"], headers, response["exc_info"])
        return [body]


def _content_type(headers: Headers) -> str:
    for name, value in headers:
        if name.lower() == "content-type":
            return value
    return ""


def _is_html(headers: Headers) -> bool:
    return _content_type(headers).split(";")[0].strip().lower() == "text/html"


def _charset(headers: Headers) -> str:
    for param in _content_type(headers).split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset" and value.strip():
            charset = value.strip().strip('"')
            try:
                "".encode(charset)
            except LookupError:
                logger.debug(f"Unknown charset {charset!r}, falling back to utf-8")
                break
            return charset
    return "utf-8"
