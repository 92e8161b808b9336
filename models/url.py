from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class URLComponents:
    """The parsed components of a single URL. Any of them may be absent."""
    scheme: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    path: Optional[str] = None
    query: Optional[str] = None # Without the leading '?'
