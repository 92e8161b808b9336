from dataclasses import dataclass, field
from typing import List

DEFAULT_MAX_HEADER_SIZE = 8192

@dataclass(frozen=True)
class Settings:
    """Runtime configuration for 'Link' header generation."""
    header_limit: bool = False # Trim the header to fit max_header_size
    max_header_size: int = DEFAULT_MAX_HEADER_SIZE # Including "Link: " and CRLF
    admin_path_prefixes: List[str] = field(default_factory=lambda: ["/administrator"])
    match_credentials: bool = True # Compare userinfo when deciding same-origin
