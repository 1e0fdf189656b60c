"""Playing-card deck primitives: cards, deck construction and deck options."""

from .builder import build_deck, config_options, new_deck
from .cards import Card, abs_rank, cards_to_labels, deal, parse_label
from .models import MAX_RANK, MIN_RANK, SUITS, DeckConfig, Rank, Suit
from .options import (
    Transform,
    ascending,
    decks,
    default_sort,
    descending,
    filter_cards,
    jokers,
    repeat,
    seeded_shuffle,
    shuffle,
    shuffle_with,
    sort_by,
)

__all__ = [
    "Card",
    "Suit",
    "Rank",
    "SUITS",
    "MIN_RANK",
    "MAX_RANK",
    "abs_rank",
    "cards_to_labels",
    "parse_label",
    "deal",
    "Transform",
    "default_sort",
    "ascending",
    "descending",
    "sort_by",
    "shuffle",
    "shuffle_with",
    "seeded_shuffle",
    "jokers",
    "filter_cards",
    "repeat",
    "decks",
    "new_deck",
    "build_deck",
    "config_options",
    "DeckConfig",
]
