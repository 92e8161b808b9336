"""Registration of 'Link' header clause renderers, one per resource kind."""
import logging
from typing import Callable, Dict, List, Optional

from models.resource import ResourceKind
from models.url import URLComponents

logger = logging.getLogger(__name__)

# A renderer turns parsed URL components into a clause, or None if it cannot
Renderer = Callable[[URLComponents, str], Optional[str]]


class RendererRegistry:
    """Registry mapping each ResourceKind to the function that renders it."""

    _renderers: Dict[ResourceKind, Renderer] = {}

    @classmethod
    def register(cls, kind: ResourceKind):
        """Decorator to register the clause renderer for a resource kind.

        Args:
            kind: The resource kind handled by the decorated function

        Example:
            @RendererRegistry.register(ResourceKind.IMAGE)
            def render_image(components: URLComponents, default_scheme: str) -> Optional[str]:
                ...
        """
        if not isinstance(kind, ResourceKind):
            raise ValueError(f"kind must be a ResourceKind, got {kind!r}")

        def decorator(renderer: Renderer) -> Renderer:
            if kind in cls._renderers:
                logger.warning(f"Renderer for '{kind.value}' already registered, overwriting")
            cls._renderers[kind] = renderer
            logger.debug(f"Registered renderer: {kind.value} -> {renderer.__name__}")
            return renderer
        return decorator

    @classmethod
    def get_renderer(cls, kind: ResourceKind) -> Optional[Renderer]:
        """Get the renderer for a kind, or None if nothing is registered."""
        return cls._renderers.get(kind)

    @classmethod
    def get_all_kinds(cls) -> List[ResourceKind]:
        """Get every kind that has a renderer."""
        return list(cls._renderers)
