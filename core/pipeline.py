import logging

from core.assembler import assemble
from core.clauses import render_clauses
from core.scanner import extract_resources
from models.resource import RequestOrigin
from models.settings import DEFAULT_MAX_HEADER_SIZE, Settings

logger = logging.getLogger(__name__)


class LinkHeaderPipeline:
    """Scan a document and build the 'Link' header value announcing its resources.

    The pipeline holds only read-only configuration, so a single instance can
    serve any number of requests.
    """

    def __init__(self, max_header_size: int = DEFAULT_MAX_HEADER_SIZE, match_credentials: bool = True):
        self.max_header_size = max_header_size
        self.match_credentials = match_credentials

    @classmethod
    def from_settings(cls, settings: Settings) -> "LinkHeaderPipeline":
        return cls(
            max_header_size=settings.max_header_size,
            match_credentials=settings.match_credentials,
        )

    def run(self, html: str, origin: RequestOrigin, default_scheme: str, limit: bool) -> str:
        """Build the header value for one document. Never raises; returns "" when there is nothing to announce."""
        try:
            candidates = extract_resources(html)
            clauses = render_clauses(candidates, origin, default_scheme, self.match_credentials)
            value = assemble(clauses, limit, self.max_header_size)
        except Exception as e:
            logger.error(f"Error building Link header: {e}", exc_info=True)
            return ""

        logger.debug(f"{len(candidates)} candidates -> {len(clauses)} clauses -> {len(value)} byte header")
        return value


def build_link_header(html: str, origin: RequestOrigin, default_scheme: str, limit: bool) -> str:
    """Build the 'Link' header value for a document with the default configuration."""
    return LinkHeaderPipeline().run(html, origin, default_scheme, limit)
