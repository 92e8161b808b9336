"""Extract resource references from a rendered HTML document."""
import logging
from typing import List

from bs4 import BeautifulSoup

from core.url_utils import sanitize_url
from models.resource import ResourceCandidate, ResourceKind

logger = logging.getLogger(__name__)

# Elements that reference resources worth announcing, matched in document order
RESOURCE_SELECTOR = "img[src], link[href][rel], script[src]"

TAG_KINDS = {
    "img": ResourceKind.IMAGE,
    "link": ResourceKind.STYLESHEET,
    "script": ResourceKind.SCRIPT,
}


def extract_resources(html: str) -> List[ResourceCandidate]:
    """
    Find every image, link and external script in a document.

    The document is parsed leniently: unclosed tags and invalid nesting are
    tolerated, and a document that cannot be parsed at all yields no
    candidates instead of an error.

    Args:
        html: The rendered response body

    Returns:
        Resource candidates in document order
    """
    if not html or not isinstance(html, str):
        return []

    try:
        # Keep the first of duplicated attributes and the raw 'rel' value, as browsers do
        soup = BeautifulSoup(
            html,
            "html.parser",
            on_duplicate_attribute="ignore",
            multi_valued_attributes=None,
        )
        elements = soup.select(RESOURCE_SELECTOR)
    except Exception as e:
        logger.debug(f"Could not parse document ({len(html)} chars): {e}")
        return []

    candidates: List[ResourceCandidate] = []
    for element in elements:
        tag = element.name.lower()
        kind = TAG_KINDS.get(tag)
        if kind is None:
            continue

        url_attribute = "href" if tag == "link" else "src"
        candidates.append(
            ResourceCandidate(
                kind=kind,
                rel_attribute=_attribute_text(element.get("rel")).lower(),
                raw_url=sanitize_url(_attribute_text(element.get(url_attribute))),
            )
        )

    logger.debug(f"Found {len(candidates)} resource candidates")
    return candidates


def _attribute_text(value) -> str:
    if value is None:
        return ""
    return str(value)
