# holdem_equity

Score Texas hold'em hands and count how often a starting pair beats a
single random opposing pair.

Every hand of five cards is packed into an integer (`Hand`) in which hands
of equal strength have the same value. A score table maps each of the 7,462
distinct five-card hand classes to a score, 0 being the best (a royal
flush). Equity is computed by comparing the best five-card score of your
pair plus the board against that of every possible opposing pair.

Lower scores are stronger. Ties count as losses.

## Installation

    pip install .

## Command line

    holdem-equity
    holdem-equity --board AH KH 4S --hand 2H 3H

Runs an exhaustive count over every remaining run-out of the board and every
opposing pair, then prints `ratio: wins losses`, where the ratio is the share
of match-ups won (`NaN` if there were none).

Options:

- `--board` — zero to five community cards (default `AH KH 4S`).
- `--hand` — exactly two hole cards (default `2H 3H`).

A card is written as its rank (`2`–`10`, `T`, `J`, `Q`, `K`, `A`) followed by
its suit (`h`, `d`, `c`, `s` in either case, or `♥ ♦ ♣ ♠`). A card given
twice is an error. With fewer than three board cards the exhaustive count
becomes very slow.

## Library use

```python
import random

from holdem_equity.card import Card, Rank, Suit
from holdem_equity.equity import eval_monte_carlo, eval_with_community, score_table

pair = (Card(Rank.TWO, Suit.HEARTS), Card(Rank.THREE, Suit.HEARTS))
board = [
    Card(Rank.ACE, Suit.HEARTS),
    Card(Rank.KING, Suit.HEARTS),
    Card(Rank.FOUR, Suit.SPADES),
]

scores = score_table()
wins, losses = eval_with_community(board, pair, scores)
print(wins / (wins + losses))

# Sample 10 distinct random boards instead of enumerating them.
wins, losses = eval_monte_carlo(pair, 10, random.Random(1), scores)
```

Modules:

- `holdem_equity.card` — `Rank`, `Suit` (integer enums), the frozen, ordered
  `Card` dataclass with `Card.from_index` / `Card.index` (`rank * 4 + suit`),
  and `deck()`, the 52 cards ordered by rank then suit.
- `holdem_equity.hand` — `Hand`, an `int` subclass with constructors
  (`from_cards`, `straight_flush`, `straight`, `rank_as_flush`, `of_rank`),
  queries (`count_rank`, `contains_rank`, `is_flush`, `in_flush`), and
  `with_rank` / `without_rank`; `hand_combos(n)`, `flush_combos()`, the
  per-category `score_*` functions and `create_score_table()`, which returns
  the table and the number of distinct scores.
- `holdem_equity.equity` — `score_table()` (built once and cached),
  `best_score(pair, community, scores)`, `eval_with_community(community,
  pair, scores)`, `eval_monte_carlo(pair, n, rng, scores)` and the command's
  `main(argv)`. The `scores` and `rng` arguments are optional.

## What it does not do

It only compares one pair against one opponent at a time: there is no
multi-way equity, no betting or game play, and the Monte Carlo estimate is
available from Python only, not from the command.

## Tests

    pip install .[test]
    pytest