"""Hold'em equity: how often a starting pair beats a random opposing pair."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterator, Sequence
from functools import cache
from itertools import combinations
from math import comb

from .card import Card, Rank, Suit, deck
from .hand import Hand, create_score_table

Pair = tuple[Card, Card]

_SUIT_LETTERS = {"h": Suit.HEARTS, "d": Suit.DIAMONDS, "c": Suit.CLUBS, "s": Suit.SPADES}
_SUIT_LETTERS.update({str(suit): suit for suit in Suit})
_RANK_LABELS = {str(rank): rank for rank in Rank}
_RANK_LABELS["T"] = Rank.TEN

_DEFAULT_BOARD = ("AH", "KH", "4S")
_DEFAULT_HAND = ("2H", "3H")


@cache
def score_table() -> dict[Hand, int]:
    """The shared table of five-card hand scores, built on first use."""
    return create_score_table()[0]


def best_score(
    pair: Pair, community: Sequence[Card], scores: dict[Hand, int] | None = None
) -> int:
    """Best (lowest) score of any five cards from the pair and the board."""
    table = score_table() if scores is None else scores
    cards = [*community, *pair]
    if len(cards) < 5:
        raise ValueError("at least five cards are needed to score a hand")
    return min(table[Hand.from_cards(five)] for five in combinations(cards, 5))


def _remaining(excluded: Sequence[Card]) -> list[Card]:
    taken = set(excluded)
    return [card for card in deck() if card not in taken]


def _duel(
    pair: Pair,
    board: list[Card],
    opponents: Iterator[Pair] | list[Pair],
    scores: dict[Hand, int],
) -> tuple[int, int]:
    on_board = set(board)
    mine = best_score(pair, board, scores)
    wins = losses = 0
    for evil in opponents:
        if evil[0] in on_board or evil[1] in on_board:
            continue
        if mine < best_score(evil, board, scores):
            wins += 1
        else:
            losses += 1
    return wins, losses


def eval_with_community(
    community: Sequence[Card], pair: Pair, scores: dict[Hand, int] | None = None
) -> tuple[int, int]:
    """Exhaustively count (wins, losses) over every run-out and opposing pair.

    Ties count as losses.
    """
    table = score_table() if scores is None else scores
    community = list(community)
    if len(community) > 5:
        raise ValueError("the board holds at most five cards")
    remaining = _remaining([*community, *pair])
    opponents = list(combinations(remaining, 2))

    wins = losses = 0
    for run_out in combinations(remaining, 5 - len(community)):
        won, lost = _duel(pair, community + list(run_out), opponents, table)
        wins += won
        losses += lost
    return wins, losses


def _sample_boards(cards: list[Card], n: int, rng: random.Random) -> list[tuple[Card, ...]]:
    total = comb(len(cards), 5)
    if n >= total:
        return list(combinations(cards, 5))
    chosen: set[tuple[Card, ...]] = set()
    while len(chosen) < n:
        chosen.add(tuple(sorted(rng.sample(cards, 5))))
    return sorted(chosen)


def eval_monte_carlo(
    pair: Pair,
    n: int,
    rng: random.Random | None = None,
    scores: dict[Hand, int] | None = None,
) -> tuple[int, int]:
    """Count (wins, losses) over ``n`` distinct random boards and every opposing pair.

    Ties count as losses.
    """
    if n < 0:
        raise ValueError("the number of boards cannot be negative")
    table = score_table() if scores is None else scores
    generator = random.Random() if rng is None else rng
    remaining = _remaining(pair)

    wins = losses = 0
    for board in _sample_boards(remaining, n, generator):
        won, lost = _duel(pair, list(board), combinations(remaining, 2), table)
        wins += won
        losses += lost
    return wins, losses


def _parse_card(text: str) -> Card:
    label, suit_text = text[:-1].upper(), text[-1:]
    suit = _SUIT_LETTERS.get(suit_text.lower(), _SUIT_LETTERS.get(suit_text))
    rank = _RANK_LABELS.get(label)
    if rank is None or suit is None:
        raise argparse.ArgumentTypeError(f"not a card: {text!r}")
    return Card(rank, suit)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the win ratio, wins and losses of a pair against a board."""
    parser = argparse.ArgumentParser(description="Exhaustive hold'em equity.")
    parser.add_argument(
        "--board", nargs="*", type=_parse_card,
        default=[_parse_card(text) for text in _DEFAULT_BOARD],
        help="community cards, e.g. AH KH 4S",
    )
    parser.add_argument(
        "--hand", nargs=2, type=_parse_card,
        default=[_parse_card(text) for text in _DEFAULT_HAND],
        help="the two hole cards, e.g. 2H 3H",
    )
    args = parser.parse_args(argv)

    cards = [*args.board, *args.hand]
    if len(set(cards)) != len(cards):
        parser.error("a card appears more than once")
    if len(args.board) > 5:
        parser.error("the board holds at most five cards")

    wins, losses = eval_with_community(args.board, (args.hand[0], args.hand[1]))
    total = wins + losses
    ratio = str(wins / total) if total else "NaN"
    print(f"{ratio}: {wins} {losses}")
    return 0