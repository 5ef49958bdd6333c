"""Card configuration modules."""

from .cards import BIRTHDAY_CARD, CARDS, DEFAULT_CARD_NAME
from .loaders import ConfigLoader

__all__ = ["BIRTHDAY_CARD", "CARDS", "DEFAULT_CARD_NAME", "ConfigLoader"]
