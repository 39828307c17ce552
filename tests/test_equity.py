import random
from math import comb

import pytest

from holdem_equity.card import Card, Rank, Suit
from holdem_equity.equity import (
    best_score,
    eval_monte_carlo,
    eval_with_community,
    main,
    score_table,
)

H, D, C, S = Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES


@pytest.fixture(scope="module")
def scores():
    return score_table()


def test_score_table_is_cached(scores):
    assert score_table() is scores


def test_royal_flush_scores_best(scores):
    pair = (Card(Rank.ACE, H), Card(Rank.KING, H))
    board = [Card(Rank.QUEEN, H), Card(Rank.JACK, H), Card(Rank.TEN, H)]
    assert best_score(pair, board, scores) == 0


def test_four_aces_with_king_is_first_four_of_a_kind(scores):
    pair = (Card(Rank.ACE, H), Card(Rank.ACE, D))
    board = [Card(Rank.ACE, C), Card(Rank.ACE, S), Card(Rank.KING, H)]
    assert best_score(pair, board, scores) == 10


def test_best_score_is_minimum_over_subsets(scores):
    pair = (Card(Rank.TWO, C), Card(Rank.SEVEN, D))
    board = [Card(Rank.ACE, H), Card(Rank.ACE, S), Card(Rank.NINE, C),
             Card(Rank.FOUR, D), Card(Rank.SEVEN, S)]
    seven = best_score(pair, board, scores)
    five_only = best_score(pair, board[:3], scores)
    assert seven <= five_only


def test_best_score_needs_five_cards(scores):
    pair = (Card(Rank.TWO, C), Card(Rank.SEVEN, D))
    with pytest.raises(ValueError):
        best_score(pair, [Card(Rank.ACE, H), Card(Rank.KING, H)], scores)


def test_board_royal_flush_always_ties(scores):
    board = [Card(Rank.ACE, H), Card(Rank.KING, H), Card(Rank.QUEEN, H),
             Card(Rank.JACK, H), Card(Rank.TEN, H)]
    pair = (Card(Rank.TWO, C), Card(Rank.THREE, D))
    wins, losses = eval_with_community(board, pair, scores)
    assert wins == 0
    assert losses == comb(45, 2)


def test_holding_royal_flush_always_wins(scores):
    board = [Card(Rank.ACE, H), Card(Rank.KING, H), Card(Rank.QUEEN, H),
             Card(Rank.TWO, C), Card(Rank.THREE, D)]
    pair = (Card(Rank.JACK, H), Card(Rank.TEN, H))
    wins, losses = eval_with_community(board, pair, scores)
    assert losses == 0
    assert wins == comb(45, 2)


def test_too_many_board_cards(scores):
    board = [Card(rank, C) for rank in list(Rank)[:6]]
    pair = (Card(Rank.ACE, H), Card(Rank.ACE, D))
    with pytest.raises(ValueError):
        eval_with_community(board, pair, scores)


def test_monte_carlo_counts_every_opponent(scores):
    pair = (Card(Rank.ACE, S), Card(Rank.ACE, C))
    wins, losses = eval_monte_carlo(pair, 2, random.Random(0), scores)
    assert wins + losses == 2 * comb(45, 2)
    assert wins > losses


def test_monte_carlo_repeatable_with_seed(scores):
    pair = (Card(Rank.SEVEN, S), Card(Rank.TWO, D))
    first = eval_monte_carlo(pair, 1, random.Random(42), scores)
    second = eval_monte_carlo(pair, 1, random.Random(42), scores)
    assert first == second


def test_monte_carlo_zero_boards(scores):
    pair = (Card(Rank.SEVEN, S), Card(Rank.TWO, D))
    assert eval_monte_carlo(pair, 0, random.Random(1), scores) == (0, 0)


def test_monte_carlo_negative_boards(scores):
    pair = (Card(Rank.SEVEN, S), Card(Rank.TWO, D))
    with pytest.raises(ValueError):
        eval_monte_carlo(pair, -1, random.Random(1), scores)


def test_main_prints_ratio_and_counts(capsys, scores):
    code = main(["--board", "AH", "KH", "QH", "JH", "10H", "--hand", "2C", "3D"])
    out = capsys.readouterr().out.strip()
    ratio, counts = out.split(": ")
    wins, losses = map(int, counts.split())
    assert code == 0
    assert (wins, losses) == (0, comb(45, 2))
    assert float(ratio) == 0.0


def test_main_rejects_duplicate_cards(scores):
    with pytest.raises(SystemExit):
        main(["--board", "AH", "KH", "QH", "JH", "10H", "--hand", "AH", "3D"])


def test_main_rejects_bad_card(scores):
    with pytest.raises(SystemExit):
        main(["--board", "ZZ", "--hand", "2C", "3D"])