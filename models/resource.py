from dataclasses import dataclass
from enum import Enum
from typing import Optional

from models.url import URLComponents


class ResourceKind(Enum):
    """Kinds of resources that can be announced in a 'Link' header."""
    IMAGE = "image"
    STYLESHEET = "stylesheet"
    SCRIPT = "script"
    PRECONNECT = "preconnect" # Assigned during classification, never found in markup


@dataclass(frozen=True)
class ResourceCandidate:
    """A resource reference found in the document, before any filtering."""
    kind: ResourceKind
    rel_attribute: str # Lower-cased 'rel' value, only meaningful for <link>
    raw_url: Optional[str] # None when sanitization left nothing behind


@dataclass(frozen=True)
class ResourceDescriptor:
    """A candidate that survived filtering, with its effective kind."""
    candidate: ResourceCandidate
    components: URLComponents
    kind: ResourceKind


@dataclass(frozen=True)
class RequestOrigin:
    """Connection details of the server handling the current request."""
    host: str = ""
    port: str = ""
    user: str = ""
    password: str = ""

    def as_components(self) -> URLComponents:
        port = int(self.port) if self.port.isdigit() else None
        return URLComponents(
            user=self.user or None,
            password=self.password or None,
            host=self.host.strip("[]").lower() or None,
            port=port,
        )
