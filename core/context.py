import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple
from urllib.parse import urlsplit

from models.resource import RequestOrigin

logger = logging.getLogger(__name__)

# Placeholder for a WSGI environ; values are mostly strings
WSGIEnviron = Dict[str, Any]

@dataclass(frozen=True)
class RequestContext:
    origin: RequestOrigin
    default_scheme: str # "https" when the request came in over TLS, else "http"
    path: str = "/"

    @classmethod
    def from_environ(cls, environ: WSGIEnviron) -> "RequestContext":
        """Derive the request context from a WSGI environ."""
        user, password = _basic_auth_credentials(environ.get("HTTP_AUTHORIZATION", ""))
        if not user:
            user = environ.get("REMOTE_USER", "") or ""

        https = str(environ.get("HTTPS", "") or "")
        if environ.get("wsgi.url_scheme") == "https" or (https and https.lower() != "off"):
            default_scheme = "https"
        else:
            default_scheme = "http"

        origin = RequestOrigin(
            host=str(environ.get("SERVER_NAME", "") or ""),
            port=str(environ.get("SERVER_PORT", "") or ""),
            user=user,
            password=password,
        )
        path = (environ.get("SCRIPT_NAME", "") or "") + (environ.get("PATH_INFO", "") or "")
        return cls(origin=origin, default_scheme=default_scheme, path=path or "/")

    @classmethod
    def from_url(cls, url: str) -> "RequestContext":
        """Derive the request context the server would see when serving url."""
        parts = urlsplit(url)
        try:
            port = parts.port
        except ValueError:
            port = None
        origin = RequestOrigin(
            host=parts.hostname or "",
            port=str(port) if port is not None else "",
            user=parts.username or "",
            password=parts.password or "",
        )
        default_scheme = "https" if parts.scheme.lower() == "https" else "http"
        return cls(origin=origin, default_scheme=default_scheme, path=parts.path or "/")


def is_admin_path(path: str, prefixes: Iterable[str]) -> bool:
    """Check whether path is inside one of the back-office prefixes."""
    for prefix in prefixes:
        prefix = prefix.rstrip("/")
        if not prefix:
            continue
        if path == prefix or path.startswith(prefix + "/"):
            return True
    return False


def _basic_auth_credentials(header: str) -> Tuple[str, str]:
    scheme, _, encoded = header.partition(" ")
    if scheme.lower() != "basic" or not encoded:
        return "", ""
    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.debug(f"Ignoring malformed basic auth header: {e}")
        return "", ""
    user, _, password = decoded.partition(":")
    return user, password
