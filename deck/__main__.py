import argparse
import logging
from typing import List, Optional

from .builder import build_deck
from .cards import cards_to_labels, deal
from .models import SORT_ORDERS, DeckConfig, Rank

LOGGER = logging.getLogger("deck")


def _rank(value: str) -> Rank:
    try:
        return Rank[value.upper()]
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown rank: {value}") from None


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Build a deck of playing cards and print it")
    parser.add_argument("--jokers", type=int, default=0)
    parser.add_argument("--decks", type=int, default=1, help="Number of combined decks")
    parser.add_argument(
        "--exclude-rank",
        type=_rank,
        action="append",
        default=[],
        help="Drop every card of this rank (e.g. Two); may be repeated",
    )
    parser.add_argument("--sort", choices=SORT_ORDERS, default="none")
    parser.add_argument("--shuffle", action="store_true")
    parser.add_argument("--seed", type=int, help="Shuffle reproducibly with this seed (implies --shuffle)")
    parser.add_argument("--deal", type=int, help="Only print this many cards from the top")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = DeckConfig(
            jokers=args.jokers,
            decks=args.decks,
            exclude_ranks=tuple(args.exclude_rank),
            sort=args.sort,
            shuffle=args.shuffle,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))

    cards = build_deck(config)
    if args.deal is not None:
        try:
            cards = deal(cards, args.deal)
        except ValueError as exc:
            parser.error(str(exc))
    LOGGER.info("Printing %d cards", len(cards))
    for label in cards_to_labels(cards):
        print(label)


if __name__ == "__main__":
    main()
