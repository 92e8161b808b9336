"""Preload clauses for same-origin resources, addressed by path only."""
from typing import Optional

from core.renderer_registry import RendererRegistry
from core.url_utils import build_file_path
from models.resource import ResourceKind
from models.url import URLComponents


def _preload(components: URLComponents, destination: str) -> Optional[str]:
    path = build_file_path(components)
    if not path:
        return None
    return f"<{path}>; rel=preload; as={destination}"


@RendererRegistry.register(ResourceKind.IMAGE)
def render_image(components: URLComponents, default_scheme: str) -> Optional[str]:
    return _preload(components, "image")


@RendererRegistry.register(ResourceKind.SCRIPT)
def render_script(components: URLComponents, default_scheme: str) -> Optional[str]:
    return _preload(components, "script")


@RendererRegistry.register(ResourceKind.STYLESHEET)
def render_stylesheet(components: URLComponents, default_scheme: str) -> Optional[str]:
    return _preload(components, "style")
