"""Playing cards: ranks, suits and the standard 52-card deck."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_RANK_LABELS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
_SUIT_SYMBOLS = ("♥", "♦", "♣", "♠")


class Rank(IntEnum):
    """Card rank, lowest first; the value is the rank's index (Two is 0)."""

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    def __str__(self) -> str:
        return _RANK_LABELS[self]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class Suit(IntEnum):
    """Card suit; the value is the suit's index (Hearts is 0)."""

    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3

    def __str__(self) -> str:
        return _SUIT_SYMBOLS[self]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


@dataclass(frozen=True, order=True)
class Card:
    """A single card, ordered by rank and then by suit."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_index(cls, value: int) -> Card:
        """Build the card whose index is ``rank * 4 + suit``."""
        if not 0 <= value <= 51:
            raise ValueError(f"invalid card value: {value}")
        rank_index, suit_index = divmod(value, len(Suit))
        return cls(Rank(rank_index), Suit(suit_index))

    def index(self) -> int:
        """Position of the card in the deck returned by :func:`deck`."""
        return int(self.rank) * len(Suit) + int(self.suit)

    def __str__(self) -> str:
        return f"{self.rank!s}{self.suit!s}"


def deck() -> list[Card]:
    """All 52 cards, ordered by rank and then by suit."""
    return [Card(rank, suit) for rank in Rank for suit in Suit]