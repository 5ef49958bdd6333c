"""
Greeting card data model.

A GreetingCard is built once from a card config dict and is read-only
afterwards.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple


class GreetingCard:
    """Immutable greeting card content and its ordered signatories."""

    __slots__ = ("front_content", "inside_content", "closing_phrases", "signatories")

    front_content: str
    inside_content: str
    closing_phrases: Mapping[str, str]
    signatories: Tuple[str, ...]

    def __init__(
        self,
        front_content: str,
        inside_content: str,
        closing_phrases: Mapping[str, str],
        signatories: Iterable[str]
    ):
        object.__setattr__(self, "front_content", front_content)
        object.__setattr__(self, "inside_content", inside_content)
        object.__setattr__(self, "closing_phrases", MappingProxyType(dict(closing_phrases)))
        object.__setattr__(self, "signatories", tuple(signatories))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"GreetingCard is read-only, cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"GreetingCard is read-only, cannot delete '{name}'")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GreetingCard):
            return NotImplemented
        return self.to_data() == other.to_data()

    def __repr__(self) -> str:
        return (
            f"GreetingCard(front_content={self.front_content!r}, "
            f"signatories={list(self.signatories)!r})"
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any], name: str = "<inline>") -> "GreetingCard":
        """
        Build a card from a card config dict.

        Args:
            config: Dict with frontContent, insideContent, closing and signatories
            name: Card name used in error messages

        Returns:
            GreetingCard

        Raises:
            ValueError: If a required field is missing or has the wrong type
        """
        front = config.get("frontContent")
        if not isinstance(front, str):
            raise ValueError(f"Card config '{name}' missing required 'frontContent' field")

        inside = config.get("insideContent")
        if not isinstance(inside, str):
            raise ValueError(f"Card config '{name}' missing required 'insideContent' field")

        closing = config.get("closing", {})
        if not isinstance(closing, dict):
            raise ValueError(f"Card config '{name}' field 'closing' must be a mapping")
        for signatory, phrase in closing.items():
            if not isinstance(signatory, str) or not isinstance(phrase, str):
                raise ValueError(f"Card config '{name}' has a non-string closing entry: {signatory!r}")

        signatories = config.get("signatories", [])
        if not isinstance(signatories, (list, tuple)):
            raise ValueError(f"Card config '{name}' field 'signatories' must be a list")
        if not all(isinstance(s, str) for s in signatories):
            raise ValueError(f"Card config '{name}' field 'signatories' must contain only strings")

        return cls(front, inside, closing, signatories)

    def closing_phrase(self, signatory: str) -> Optional[str]:
        """Return the closing phrase for a signatory, or None if it has none."""
        return self.closing_phrases.get(signatory)

    def to_data(self) -> Dict[str, Any]:
        """Plain data view of the card, for template evaluation."""
        return {
            "front_content": self.front_content,
            "inside_content": self.inside_content,
            "closing_phrases": dict(self.closing_phrases),
            "signatories": list(self.signatories),
        }
