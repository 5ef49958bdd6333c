"""Card rendering modules."""

from .card_renderer import CardRenderer, DEFAULT_LAYOUT, render

__all__ = ["CardRenderer", "DEFAULT_LAYOUT", "render"]
