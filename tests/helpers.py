from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from deck.cards import Card
from deck.models import Suit


def count_suit(cards: Iterable[Card], suit: Suit) -> int:
    return sum(1 for card in cards if card.suit == suit)


def same_cards(left: List[Card], right: List[Card]) -> bool:
    """True when both lists hold the same cards with the same multiplicity."""
    return Counter(left) == Counter(right)
