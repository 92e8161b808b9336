import httpx
import logging
from typing import Optional, Dict

# Default timeout configuration (in seconds)
DEFAULT_TIMEOUT = 10.0
DEFAULT_CONNECT_TIMEOUT = 5.0

# Ask for the rendered page the way a browser would
DEFAULT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
    "User-Agent": "linkpush/0.1 (+Link header preview)",
}

async def fetch_url(
    url: str,
    timeout: Optional[float] = None,
    connect_timeout: Optional[float] = None,
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Response:
    """
    Fetch a page whose resources should be announced, following redirects.

    The response is returned whatever its status code; error pages are
    rendered HTML too.

    Args:
        url: The page URL
        timeout: Total request timeout in seconds (default: 10s)
        connect_timeout: Connection timeout in seconds (default: 5s)
        headers: Extra HTTP headers, merged over DEFAULT_HEADERS

    Returns:
        httpx.Response object; response.url is the final URL after redirects
    """
    logger = logging.getLogger(__name__)
    request_headers = {**DEFAULT_HEADERS, **(headers or {})}
    timeout_config = httpx.Timeout(
        timeout=timeout or DEFAULT_TIMEOUT,
        connect=connect_timeout or DEFAULT_CONNECT_TIMEOUT
    )

    try:
        async with httpx.AsyncClient(timeout=timeout_config, follow_redirects=True, headers=request_headers) as client:
            response = await client.get(url)
    except httpx.TimeoutException as e:
        logger.warning(f"HTTP timeout for {url}: {e}")
        raise
    except httpx.RequestError as e:
        logger.warning(f"HTTP request error for {url}: {e}")
        raise

    logger.debug(f"HTTP {response.status_code} {response.url} ({len(response.content)} bytes, {len(response.history)} redirects)")
    return response
