from typing import Optional

from core.renderer_registry import RendererRegistry
from core.url_utils import build_host_url
from models.resource import ResourceKind
from models.url import URLComponents


@RendererRegistry.register(ResourceKind.PRECONNECT)
def render_preconnect(components: URLComponents, default_scheme: str) -> Optional[str]:
    """Preconnect clause for a cross-origin host. The path is not announced."""
    host_url = build_host_url(components, default_scheme)
    if not host_url:
        return None
    return f"<{host_url}>; rel=preconnect"
