"""
Card configuration loader.

Builds GreetingCard values from the bundled card configs.
"""

from typing import Any, Dict, List, Optional

from ..card import GreetingCard
from .cards import CARDS


class ConfigLoader:
    """Loads card configurations by name from an in-memory catalog."""

    def __init__(self, cards: Optional[Dict[str, Dict[str, Any]]] = None):
        self.cards = CARDS if cards is None else cards

    def load_card(self, card_name: str) -> GreetingCard:
        """Load a card configuration by name."""
        if card_name not in self.cards:
            raise KeyError(f"Card config not found: {card_name}")

        return GreetingCard.from_config(self.cards[card_name], name=card_name)

    def available_cards(self) -> List[str]:
        """Get list of all card names in the catalog."""
        return sorted(self.cards)
