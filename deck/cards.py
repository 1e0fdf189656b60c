from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from .models import MAX_RANK, Rank, Suit


@dataclass(frozen=True)
class Card:
    suit: Suit
    # Joker cards carry a plain int here (their insertion index), never a Rank.
    rank: Union[Rank, int] = 0

    def __post_init__(self) -> None:
        try:
            suit = Suit(self.suit)
        except ValueError:
            raise ValueError(f"Invalid suit: {self.suit}") from None
        object.__setattr__(self, "suit", suit)
        try:
            rank = int(self.rank) if suit == Suit.JOKER else Rank(self.rank)
        except (ValueError, TypeError):
            raise ValueError(f"Invalid rank: {self.rank}") from None
        object.__setattr__(self, "rank", rank)

    @property
    def label(self) -> str:
        if self.suit == Suit.JOKER:
            return str(self.suit)
        return f"{self.rank} of {self.suit}s"

    def __str__(self) -> str:
        return self.label


def abs_rank(card: Card) -> int:
    """Total-order key: every Spade sorts below every Diamond, and so on."""
    return int(card.suit) * int(MAX_RANK) + int(card.rank)


def cards_to_labels(cards: List[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    words = label.split()
    if len(words) == 1 and words[0].lower() == "joker":
        return Card(Suit.JOKER)
    if len(words) != 3 or words[1].lower() != "of" or not words[2].lower().endswith("s"):
        raise ValueError(f"Invalid card label: {label}")
    try:
        rank = Rank[words[0].upper()]
        suit = Suit[words[2][:-1].upper()]
    except KeyError:
        raise ValueError(f"Invalid card label: {label}") from None
    if suit == Suit.JOKER:
        raise ValueError(f"Invalid card label: {label}")
    return Card(suit, rank)


def deal(deck: List[Card], count: int) -> List[Card]:
    """Remove the top ``count`` cards from ``deck`` and return them."""
    if count < 0:
        raise ValueError(f"Invalid deal count: {count}")
    if len(deck) < count:
        raise ValueError("Not enough cards left in deck")
    cards = deck[:count]
    del deck[:count]
    return cards
