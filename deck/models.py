from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple


class Suit(IntEnum):
    SPADE = 0
    DIAMOND = 1
    CLUB = 2
    HEART = 3
    JOKER = 4

    def __str__(self) -> str:
        return self.name.title()


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.name.title()


SUITS: Tuple[Suit, ...] = (Suit.SPADE, Suit.DIAMOND, Suit.CLUB, Suit.HEART)
MIN_RANK = Rank.ACE
MAX_RANK = Rank.KING

SORT_ORDERS = ("none", "asc", "desc")


@dataclass
class DeckConfig:
    jokers: int = 0
    decks: int = 1
    exclude_ranks: Tuple[Rank, ...] = ()
    sort: str = "none"
    shuffle: bool = False
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.jokers < 0:
            raise ValueError(f"Invalid joker count: {self.jokers}")
        if self.decks < 0:
            raise ValueError(f"Invalid deck count: {self.decks}")
        if self.sort not in SORT_ORDERS:
            raise ValueError(f"Invalid sort order: {self.sort}")
        if self.sort != "none" and (self.shuffle or self.seed is not None):
            raise ValueError("Cannot both sort and shuffle the deck")
        self.exclude_ranks = tuple(Rank(rank) for rank in self.exclude_ranks)
