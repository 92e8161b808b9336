"""Decide whether a resource is served by the current origin."""
from dataclasses import replace

from core.url_utils import build_host_url
from models.resource import RequestOrigin, ResourceKind
from models.url import URLComponents


def is_self_hosted(
    components: URLComponents,
    origin: RequestOrigin,
    default_scheme: str,
    match_credentials: bool = True,
) -> bool:
    """
    Check whether a URL points at the server handling the current request.

    A URL without a host is relative and always self-hosted. Otherwise the
    host-only forms of the URL and of the origin must be identical. Embedded
    credentials are part of that comparison unless match_credentials is False.

    Args:
        components: Parsed resource URL
        origin: Connection details of the current request
        default_scheme: Scheme of the current request ("http" or "https")
        match_credentials: Include user and password in the comparison

    Returns:
        True if the resource is same-origin
    """
    if not components.host:
        return True

    server = origin.as_components()
    if not match_credentials:
        components = replace(components, user=None, password=None)
        server = replace(server, user=None, password=None)

    target_url = build_host_url(components, default_scheme)
    server_url = build_host_url(server, default_scheme)
    return target_url is not None and server_url is not None and target_url == server_url


def classify(
    components: URLComponents,
    kind: ResourceKind,
    origin: RequestOrigin,
    default_scheme: str,
    match_credentials: bool = True,
) -> ResourceKind:
    """Return the kind a resource should be rendered as."""
    if is_self_hosted(components, origin, default_scheme, match_credentials):
        return kind
    return ResourceKind.PRECONNECT
