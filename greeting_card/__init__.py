"""Greeting card rendering."""

from .card import GreetingCard
from .config import ConfigLoader
from .rendering import CardRenderer, render

__all__ = ["GreetingCard", "ConfigLoader", "CardRenderer", "render"]
