"""Deck options: functions that take a card list and return a card list.

Each option is passed to ``new_deck`` and applied in order, so they compose
freely::

    new_deck(jokers(2), repeat(3), shuffle)
"""

from __future__ import annotations

import functools
import logging
import random
import time
from typing import Callable, List

from .cards import Card, abs_rank
from .models import Suit

LOGGER = logging.getLogger("deck")

Transform = Callable[[List[Card]], List[Card]]
Less = Callable[[int, int], bool]


def default_sort(cards: List[Card]) -> List[Card]:
    """Sort cards in place by absolute rank, Ace of Spades first."""
    cards.sort(key=abs_rank)
    return cards


def ascending(cards: List[Card]) -> Less:
    return lambda i, j: abs_rank(cards[i]) < abs_rank(cards[j])


def descending(cards: List[Card]) -> Less:
    return lambda i, j: abs_rank(cards[i]) > abs_rank(cards[j])


def sort_by(less: Callable[[List[Card]], Less]) -> Transform:
    """Sort with a custom less function built from the list being sorted.

    ``less(cards)`` must return a predicate over two indices into ``cards``.
    For example, reverse order::

        sort_by(lambda cards: lambda i, j: abs_rank(cards[i]) > abs_rank(cards[j]))

    Ties keep their input order.
    """

    def apply(cards: List[Card]) -> List[Card]:
        before = less(cards)

        def compare(i: int, j: int) -> int:
            if before(i, j):
                return -1
            if before(j, i):
                return 1
            return 0

        order = sorted(range(len(cards)), key=functools.cmp_to_key(compare))
        cards[:] = [cards[idx] for idx in order]
        return cards

    return apply


def shuffle_with(rng: random.Random) -> Transform:
    """Shuffle in place using a caller-owned random source."""

    def apply(cards: List[Card]) -> List[Card]:
        rng.shuffle(cards)
        return cards

    return apply


def seeded_shuffle(seed: int) -> Transform:
    """Shuffle reproducibly: a new generator seeded with ``seed`` on every call."""

    def apply(cards: List[Card]) -> List[Card]:
        return shuffle_with(random.Random(seed))(cards)

    return apply


def shuffle(cards: List[Card]) -> List[Card]:
    seed = time.time_ns()
    LOGGER.debug("Shuffling %d cards with seed %d", len(cards), seed)
    return seeded_shuffle(seed)(cards)


def jokers(n: int) -> Transform:
    """Append ``n`` Jokers to the deck.

    A Joker's rank is just its index among the added Jokers (0, 1, ...) and
    carries no meaning.
    """

    def apply(cards: List[Card]) -> List[Card]:
        cards.extend(Card(Suit.JOKER, idx) for idx in range(n))
        return cards

    return apply


def filter_cards(exclude: Callable[[Card], bool]) -> Transform:
    """Drop every card for which ``exclude`` returns True."""

    def apply(cards: List[Card]) -> List[Card]:
        return [card for card in cards if not exclude(card)]

    return apply


def repeat(n: int) -> Transform:
    """Combine ``n`` copies of the deck, one after another."""

    def apply(cards: List[Card]) -> List[Card]:
        return cards * max(n, 0)

    return apply


decks = repeat
