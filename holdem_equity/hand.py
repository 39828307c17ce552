"""Bit-packed poker hands and the table that ranks every five-card hand.

A hand is a 64-bit integer.  The low 39 bits hold a 3-bit count per rank
(Two in bits 0-2, Ace in bits 36-38).  Bit 63 is set when the hand holds five
or more cards of one suit, and bits 50-62 then mark which ranks carry that
suit.  Two five-card hands have the same value exactly when they score the
same.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import reduce
from itertools import combinations
from operator import or_
from typing import ClassVar

from .card import Card, Rank, deck

_FLUSH_BIT = 1 << 63
_SUIT_OFFSET = 50
_RANK_WIDTH = 3
_RANK_MASK = 0b111
_RUN_OF_FIVE = 0b001001001001001
_RUN_OF_FOUR = 0b001001001001
_MAX_COPIES = 4

_STRAIGHT_HIGHS = tuple(rank for rank in reversed(Rank) if rank >= Rank.FIVE)


def _count_bit(rank: int) -> int:
    return 1 << (rank * _RANK_WIDTH)


def _flush_rank_bit(rank: int) -> int:
    return 1 << (rank + _SUIT_OFFSET)


def _entry(card: Card) -> tuple[int, int, int]:
    return _count_bit(card.rank), int(card.suit), _flush_rank_bit(card.rank)


def _value(entries: tuple[tuple[int, int, int], ...] | list[tuple[int, int, int]]) -> int:
    value = 0
    suit_counts = [0, 0, 0, 0]
    for bit, suit, _ in entries:
        value += bit
        suit_counts[suit] += 1
    if len(entries) < 5:
        return value
    for flush_suit, count in enumerate(suit_counts):
        if count >= 5:
            value |= _FLUSH_BIT
            for _, suit, flush_bit in entries:
                if suit == flush_suit:
                    value |= flush_bit
            break
    return value


_DECK_ENTRIES = tuple(_entry(card) for card in reversed(deck()))


def _combo_values(n: int) -> Iterator[int]:
    for combo in combinations(_DECK_ENTRIES, n):
        yield _value(combo)


class Hand(int):
    """An immutable hand packed into an integer (see the module docstring)."""

    __slots__ = ()

    EMPTY: ClassVar[Hand]

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> Hand:
        """Pack any number of cards into a hand."""
        return cls(_value([_entry(card) for card in cards]))

    @classmethod
    def straight_flush(cls, high_rank: Rank) -> Hand:
        """The straight flush topped by ``high_rank`` (Five means A-2-3-4-5)."""
        if high_rank == Rank.FIVE:
            return cls(
                _FLUSH_BIT
                | (0b1111 << _SUIT_OFFSET)
                | _flush_rank_bit(Rank.ACE)
                | _RUN_OF_FOUR
                | _count_bit(Rank.ACE)
            )
        low = cls._straight_low(high_rank)
        return cls(
            _FLUSH_BIT
            | (0b11111 << (low + _SUIT_OFFSET))
            | (_RUN_OF_FIVE << (low * _RANK_WIDTH))
        )

    @classmethod
    def straight(cls, high_rank: Rank) -> Hand:
        """The plain straight topped by ``high_rank`` (Five means A-2-3-4-5)."""
        if high_rank == Rank.FIVE:
            return cls(_RUN_OF_FOUR | _count_bit(Rank.ACE))
        low = cls._straight_low(high_rank)
        return cls(_RUN_OF_FIVE << (low * _RANK_WIDTH))

    @staticmethod
    def _straight_low(high_rank: Rank) -> int:
        if high_rank < Rank.FIVE:
            raise ValueError(f"no straight is topped by {high_rank}")
        return int(high_rank) - 4

    @classmethod
    def rank_as_flush(cls, rank: Rank) -> Hand:
        """A single card of ``rank`` marked as part of a flush."""
        return cls(_FLUSH_BIT | _flush_rank_bit(rank) | _count_bit(rank))

    @classmethod
    def of_rank(cls, rank: Rank, n: int) -> Hand:
        """A hand of ``n`` cards of ``rank``."""
        if not 0 <= n <= _MAX_COPIES:
            raise ValueError(f"cannot hold {n} cards of one rank")
        return cls(n * _count_bit(rank))

    def contains_rank(self, rank: Rank) -> bool:
        return self.count_rank(rank) != 0

    def count_rank(self, rank: Rank) -> int:
        return (int(self) >> (rank * _RANK_WIDTH)) & _RANK_MASK

    def is_flush(self) -> bool:
        return bool(int(self) & _FLUSH_BIT)

    def in_flush(self, rank: Rank) -> bool:
        """Whether ``rank`` carries the flush suit."""
        return bool(int(self) & _flush_rank_bit(rank))

    def with_rank(self, rank: Rank, n: int = 1) -> Hand:
        """This hand with ``n`` more cards of ``rank``."""
        if n < 0 or self.count_rank(rank) + n > _MAX_COPIES:
            raise ValueError(f"cannot add {n} cards of rank {rank}")
        return Hand(int(self) + n * _count_bit(rank))

    def without_rank(self, rank: Rank) -> Hand:
        """This hand with one card of ``rank`` removed."""
        if not self.contains_rank(rank):
            raise ValueError(f"hand holds no card of rank {rank}")
        return Hand(int(self) - _count_bit(rank))

    def __or__(self, other: int) -> Hand:
        return Hand(int(self) | int(other))

    def __str__(self) -> str:
        return "".join(
            f"[{'f' if self.in_flush(rank) else ''}{rank}] "
            for rank in Rank
            for _ in range(self.count_rank(rank))
        )

    def __repr__(self) -> str:
        return f"Hand({int(self):#018x})"


Hand.EMPTY = Hand(0)


def hand_combos(n: int) -> Iterator[Hand]:
    """Yield the hand of every combination of ``n`` cards, best cards first."""
    for value in _combo_values(n):
        yield Hand(value)


def flush_combos() -> list[Hand]:
    """Every set of five distinct ranks as a flush, best first."""
    singles = [Hand.rank_as_flush(rank) for rank in reversed(Rank)]
    return [reduce(or_, combo, Hand.EMPTY) for combo in combinations(singles, 5)]


def _assign(scores: dict[Hand, int], value: int, score: int) -> int:
    if value in scores:
        return score
    scores[Hand(value)] = score
    return score + 1


def score_straight_flush(scores: dict[Hand, int], offset: int) -> int:
    """Score the straight flushes from ``offset``; return the next free score."""
    score = offset
    for high in _STRAIGHT_HIGHS:
        score = _assign(scores, Hand.straight_flush(high), score)
    return score


def score_n_of_a_kind(scores: dict[Hand, int], offset: int, n: int) -> int:
    """Score ``n`` of a kind with kickers; hands already scored are skipped."""
    if not 1 <= n <= _MAX_COPIES:
        raise ValueError(f"cannot score {n} of a kind")
    score = offset
    for set_rank in reversed(Rank):
        base = n * _count_bit(set_rank)
        mask = _RANK_MASK << (set_rank * _RANK_WIDTH)
        for kickers in _combo_values(5 - n):
            if kickers & mask:
                continue
            score = _assign(scores, base | kickers, score)
    return score


def score_full_house(scores: dict[Hand, int], offset: int) -> int:
    score = offset
    for three_rank in reversed(Rank):
        for pair_rank in reversed(Rank):
            if three_rank == pair_rank:
                continue
            hand = Hand.of_rank(three_rank, 3).with_rank(pair_rank, 2)
            score = _assign(scores, hand, score)
    return score


def score_flush(scores: dict[Hand, int], offset: int) -> int:
    score = offset
    for hand in flush_combos():
        score = _assign(scores, hand, score)
    return score


def score_straight(scores: dict[Hand, int], offset: int) -> int:
    score = offset
    for high in _STRAIGHT_HIGHS:
        score = _assign(scores, Hand.straight(high), score)
    return score


def score_two_pair(scores: dict[Hand, int], offset: int) -> int:
    score = offset
    for high_pair in reversed(Rank):
        for low_pair in reversed(Rank):
            if low_pair >= high_pair:
                continue
            pairs = Hand.of_rank(high_pair, 2).with_rank(low_pair, 2)
            for kicker in reversed(Rank):
                if pairs.contains_rank(kicker):
                    continue
                score = _assign(scores, pairs.with_rank(kicker), score)
    return score


def score_high_card(scores: dict[Hand, int], offset: int) -> int:
    score = offset
    for value in _combo_values(5):
        score = _assign(scores, value, score)
    return score


def create_score_table() -> tuple[dict[Hand, int], int]:
    """Map every distinct five-card hand to its score (0 is best).

    Returns the table and the number of distinct scores.
    """
    scores: dict[Hand, int] = {}
    score = score_straight_flush(scores, 0)
    score = score_n_of_a_kind(scores, score, 4)
    score = score_full_house(scores, score)
    score = score_flush(scores, score)
    score = score_straight(scores, score)
    score = score_n_of_a_kind(scores, score, 3)
    score = score_two_pair(scores, score)
    score = score_n_of_a_kind(scores, score, 2)
    score = score_high_card(scores, score)
    return scores, score