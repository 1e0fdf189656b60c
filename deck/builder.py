from __future__ import annotations

import logging
from typing import List

from .cards import Card
from .models import MAX_RANK, MIN_RANK, SUITS, DeckConfig, Rank
from .options import (
    Transform,
    default_sort,
    descending,
    filter_cards,
    jokers,
    repeat,
    seeded_shuffle,
    shuffle,
    sort_by,
)

LOGGER = logging.getLogger("deck")


def new_deck(*opts: Transform) -> List[Card]:
    """Return a fresh 52-card deck run through ``opts`` in order.

    With no options the deck is Spades, Diamonds, Clubs, Hearts, each from Ace
    up to King.
    """
    cards = [Card(suit, Rank(rank)) for suit in SUITS for rank in range(MIN_RANK, MAX_RANK + 1)]
    for opt in opts:
        cards = opt(cards)
    LOGGER.debug("Built deck of %d cards with %d options", len(cards), len(opts))
    return cards


def config_options(config: DeckConfig) -> List[Transform]:
    # Filter before adding jokers so excluded ranks never catch a Joker's index.
    chain: List[Transform] = []
    if config.exclude_ranks:
        excluded = frozenset(config.exclude_ranks)
        chain.append(filter_cards(lambda card: card.rank in excluded))
    if config.jokers:
        chain.append(jokers(config.jokers))
    if config.decks != 1:
        chain.append(repeat(config.decks))
    if config.sort == "asc":
        chain.append(default_sort)
    elif config.sort == "desc":
        chain.append(sort_by(descending))
    if config.seed is not None:
        chain.append(seeded_shuffle(config.seed))
    elif config.shuffle:
        chain.append(shuffle)
    return chain


def build_deck(config: DeckConfig) -> List[Card]:
    return new_deck(*config_options(config))
