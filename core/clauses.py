"""Turn resource candidates into 'Link' header clauses."""
import logging
from typing import Iterable, List, Optional

from core.classifier import classify
from core.renderer_registry import RendererRegistry
from core.url_utils import parse_url
from models.resource import RequestOrigin, ResourceCandidate, ResourceDescriptor, ResourceKind

# Import all renderers to trigger @RendererRegistry.register decorators
import renderers.preload
import renderers.preconnect

logger = logging.getLogger(__name__)


def describe(
    candidate: ResourceCandidate,
    origin: RequestOrigin,
    default_scheme: str,
    match_credentials: bool = True,
) -> Optional[ResourceDescriptor]:
    """
    Filter a candidate and decide how it should be announced.

    Candidates without a usable URL, and <link> elements that are not plain
    stylesheets, are dropped.

    Returns:
        The descriptor, or None if the candidate is dropped
    """
    if not candidate.raw_url:
        logger.debug(f"Dropping {candidate.kind.value} without URL")
        return None

    if candidate.kind == ResourceKind.STYLESHEET and candidate.rel_attribute != "stylesheet":
        logger.debug(f"Dropping link with rel={candidate.rel_attribute!r}: {candidate.raw_url}")
        return None

    components = parse_url(candidate.raw_url)
    if components is None:
        logger.debug(f"Dropping {candidate.kind.value} with unparseable URL: {candidate.raw_url}")
        return None

    kind = classify(components, candidate.kind, origin, default_scheme, match_credentials)
    return ResourceDescriptor(candidate=candidate, components=components, kind=kind)


def render_clause(descriptor: ResourceDescriptor, default_scheme: str) -> Optional[str]:
    """Render a descriptor with the renderer registered for its kind."""
    renderer = RendererRegistry.get_renderer(descriptor.kind)
    if renderer is None:
        logger.warning(f"No renderer registered for '{descriptor.kind.value}'")
        return None

    clause = renderer(descriptor.components, default_scheme)
    if not clause:
        logger.debug(f"Renderer for '{descriptor.kind.value}' produced nothing for {descriptor.candidate.raw_url}")
        return None
    return clause


def render_clauses(
    candidates: Iterable[ResourceCandidate],
    origin: RequestOrigin,
    default_scheme: str,
    match_credentials: bool = True,
) -> List[str]:
    """Describe and render every candidate, keeping document order."""
    clauses: List[str] = []
    for candidate in candidates:
        try:
            descriptor = describe(candidate, origin, default_scheme, match_credentials)
            if descriptor is None:
                continue
            clause = render_clause(descriptor, default_scheme)
        except Exception as e:
            logger.error(f"Error rendering {candidate.kind.value} {candidate.raw_url!r}: {e}", exc_info=True)
            continue
        if clause is not None:
            clauses.append(clause)
    return clauses
