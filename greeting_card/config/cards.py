"""Bundled card configurations."""

from typing import Any, Dict

BIRTHDAY_CARD: Dict[str, Any] = {
    "frontContent": "Happy Birthday, Odin One-Eye!",
    "insideContent": "From Asgard to Nifelheim, you're the best all-father ever.\n\nLove,",
    "closing": {
        "Thor": "Admiration, respect, and love",
        "Loki": "Your son"
    },
    "signatories": [
        "Thor",
        "Loki"
    ]
}

DEFAULT_CARD_NAME = "odin_birthday"

CARDS: Dict[str, Dict[str, Any]] = {
    DEFAULT_CARD_NAME: BIRTHDAY_CARD,
}
