#!/usr/bin/env python3
"""
print_card.py - Print the bundled birthday card

Renders the front line, the inside message and one closing line per
signatory to stdout. Takes no arguments.
"""

import logging
import sys

from greeting_card.config import ConfigLoader, DEFAULT_CARD_NAME
from greeting_card.rendering import CardRenderer

logger = logging.getLogger(__name__)


def main():
    """Main CLI entry point."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        card = ConfigLoader().load_card(DEFAULT_CARD_NAME)
        count = CardRenderer().print_card(card)
        sys.stdout.flush()
        logger.debug("Printed %d lines for card '%s'", count, DEFAULT_CARD_NAME)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
