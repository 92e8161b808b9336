import logging
from typing import Dict, Optional, Tuple

from config.settings_loader import load_settings
from core.context import RequestContext
from core.pipeline import LinkHeaderPipeline
from fetch.http_client import fetch_url
from models.settings import Settings


class LinkHeaderEngine:
    def __init__(self, settings: Optional[Settings] = None, custom_headers: Optional[Dict[str, str]] = None):
        """Initialize the engine used to compute Link headers for live pages.

        Args:
            settings: Header settings (loaded from config/settings.yaml if omitted)
            custom_headers: Extra HTTP headers sent with every fetch
        """
        self.logger = logging.getLogger(__name__)
        self.settings = settings or load_settings()
        self.custom_headers = custom_headers or {}
        self.pipeline = LinkHeaderPipeline.from_settings(self.settings)
        self.logger.debug(f"Initialized engine with {self.settings}")

    async def scan_url(self, url: str) -> Tuple[RequestContext, str]:
        """Fetch a page and return the request context it was served under with its body."""
        response = await fetch_url(url, headers=self.custom_headers or None)
        final_url = str(response.url)
        if final_url != url:
            self.logger.info(f"Followed redirects to {final_url}")

        content_type = response.headers.get("content-type", "")
        if "html" not in content_type.lower():
            self.logger.warning(f"{final_url} is not HTML ({content_type or 'no content-type'})")

        return RequestContext.from_url(final_url), response.text

    def build(self, context: RequestContext, html: str) -> str:
        """Compute the Link header value for an already available document."""
        return self.pipeline.run(html, context.origin, context.default_scheme, self.settings.header_limit)

    async def build_for_url(self, url: str) -> str:
        """Fetch a page and compute the Link header the server should send with it."""
        context, html = await self.scan_url(url)
        self.logger.debug(f"Fetched {len(html)} chars, origin {context.origin.host}:{context.origin.port or '-'}")
        return self.build(context, html)
