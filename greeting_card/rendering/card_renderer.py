"""
Card rendering from greeting card data and a layout.

Handles template evaluation for the front, inside and closing lines.
"""

import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from ..card import GreetingCard
from ..template import JSONPathEngine, ExpressionParser

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT: Dict[str, str] = {
    "front": "{$.front_content}",
    "inside": "{$.inside_content}",
    "foreach": "$.signatories[*]",
    "closing": "{$.phrase}, {$.name}",
}

REQUIRED_LAYOUT_FIELDS = ("front", "inside", "foreach", "closing")


class CardRenderer:
    """Renders greeting cards into output lines using a layout of templates."""

    def __init__(self, layout: Optional[Dict[str, str]] = None):
        if layout is None:
            layout = DEFAULT_LAYOUT

        for field_name in REQUIRED_LAYOUT_FIELDS:
            if not isinstance(layout.get(field_name), str):
                raise ValueError(f"Card layout missing required '{field_name}' field")

        self.layout = dict(layout)
        self.jsonpath = JSONPathEngine()
        self.expr_parser = ExpressionParser(self.jsonpath)

    def render(self, card: GreetingCard) -> List[str]:
        """
        Render a card into its output units.

        Args:
            card: Card to render

        Returns:
            Front line, inside block, then one closing line per signatory
            in signatory order
        """
        data = card.to_data()

        lines = [
            self.expr_parser.evaluate_template_string(self.layout["front"], data),
            self.expr_parser.evaluate_template_string(self.layout["inside"], data),
        ]

        for signatory in self.jsonpath.evaluate(self.layout["foreach"], data):
            lines.append(self.render_closing(card, signatory))

        return lines

    def render_closing(self, card: GreetingCard, signatory: str) -> str:
        """
        Render the closing line for one signatory.

        A signatory with no closing phrase is rendered with an empty phrase.
        """
        item: Dict[str, Any] = {"name": signatory}

        phrase = card.closing_phrase(signatory)
        if phrase is None:
            logger.warning("No closing phrase for signatory %r, rendering it without one", signatory)
        else:
            item["phrase"] = phrase

        return self.expr_parser.evaluate_template_string(self.layout["closing"], item)

    def print_card(self, card: GreetingCard, stream: Optional[TextIO] = None) -> int:
        """
        Write a rendered card to a stream, one unit per line.

        Returns:
            Number of units written
        """
        if stream is None:
            stream = sys.stdout

        lines = self.render(card)
        for line in lines:
            print(line, file=stream)
        return len(lines)


def render(card: GreetingCard) -> List[str]:
    """Render a card with the default layout."""
    return CardRenderer().render(card)
