"""Join 'Link' header clauses into a single header value."""
import logging
from typing import Iterable, List

from models.settings import DEFAULT_MAX_HEADER_SIZE

logger = logging.getLogger(__name__)

CLAUSE_SEPARATOR = ", "
# Bytes taken by the header name and line terminator around the value
HEADER_OVERHEAD = len("Link: \r\n")


def deduplicate(clauses: Iterable[str]) -> List[str]:
    """Remove repeated clauses, keeping the first occurrence of each."""
    seen: dict[str, None] = {}
    for clause in clauses:
        if clause not in seen:
            seen[clause] = None
    return list(seen)


def max_value_size(max_header_size: int = DEFAULT_MAX_HEADER_SIZE) -> int:
    """Largest header value, in bytes, that fits in max_header_size."""
    return max_header_size - HEADER_OVERHEAD


def assemble(clauses: Iterable[str], limit: bool, max_header_size: int = DEFAULT_MAX_HEADER_SIZE) -> str:
    """
    Build the 'Link' header value from rendered clauses.

    When limit is set, clauses are dropped from the end until the value fits.
    Resources found earlier in the document are therefore kept in favour of
    later ones.

    Args:
        clauses: Rendered clauses in document order
        limit: Whether to enforce the size ceiling
        max_header_size: Size of the complete header line, in bytes

    Returns:
        The header value, possibly empty
    """
    unique = deduplicate(clauses)
    value = CLAUSE_SEPARATOR.join(unique)
    if not limit:
        return value

    ceiling = max_value_size(max_header_size)
    original_count = len(unique)
    while unique and len(value.encode("utf-8")) > ceiling:
        unique.pop()
        value = CLAUSE_SEPARATOR.join(unique)

    if len(unique) < original_count:
        logger.info(f"Link header trimmed from {original_count} to {len(unique)} clauses to fit {ceiling} bytes")
    return value
