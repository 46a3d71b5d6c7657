import pytest

from pingpong import elo
from pingpong.models import Player


@pytest.mark.parametrize("value,expected", [
    (0.5, 1),
    (-0.5, -1),
    (2.5, 3),
    (-2.5, -3),
    (16.4, 16),
    (-16.73, -17),
    (0.0, 0),
])
def test_round_half_away_from_zero(value, expected):
    assert elo.round_half_away_from_zero(value) == expected


def test_expected_scores_sum_to_one():
    p1 = elo.expected_score(516, 500)
    p2 = elo.expected_score(500, 516)
    assert p1 == pytest.approx(0.523, abs=1e-3)
    assert p1 + p2 == pytest.approx(1.0)
    assert elo.expected_score(500, 500) == 0.5


def test_decide_winner_is_strict():
    assert elo.decide_winner(21, 15) == 1
    assert elo.decide_winner(15, 21) == 2
    assert elo.decide_winner(11, 11) == 2


def test_equal_ratings_swing_sixteen():
    alice, bob = Player("Alice"), Player("Bob")

    winner = elo.record_match(alice, 21, bob, 15)

    assert winner == "Alice"
    assert alice.rating == 516
    assert bob.rating == 484
    assert alice.games_played == 1
    assert bob.games_played == 1


def test_higher_rated_player_loses_more():
    alice, carol = Player("Alice", 516), Player("Carol")

    winner = elo.record_match(alice, 10, carol, 21)

    assert winner == "Carol"
    assert alice.rating == 499
    assert carol.rating == 517


def test_favourite_gains_little_underdog_gains_a_lot():
    favourite, underdog = Player("F", 900), Player("U", 500)
    elo.record_match(favourite, 11, underdog, 2)
    assert (favourite.rating, underdog.rating) == (903, 497)

    favourite, underdog = Player("F", 900), Player("U", 500)
    elo.record_match(favourite, 2, underdog, 11)
    assert (favourite.rating, underdog.rating) == (871, 529)


def test_tie_goes_to_player_two():
    alice, bob = Player("Alice"), Player("Bob")

    winner = elo.record_match(alice, 11, bob, 11)

    assert winner == "Bob"
    assert bob.rating == 516
    assert alice.rating == 484


def test_margin_does_not_matter():
    a1, b1 = Player("A"), Player("B")
    a2, b2 = Player("A"), Player("B")

    elo.record_match(a1, 11, b1, 9)
    elo.record_match(a2, 21, b2, 0)

    assert (a1.rating, b1.rating) == (a2.rating, b2.rating)


def test_ratings_are_unbounded_and_scores_may_be_negative():
    low, high = Player("Low", -20), Player("High", 10)

    winner = elo.record_match(low, -5, high, 0)

    assert winner == "High"
    assert low.rating < -20
    assert high.rating > 10


def test_deltas_stay_within_one_of_each_other():
    for r1, r2 in [(500, 500), (516, 500), (733, 412), (100, 1400), (-50, 60)]:
        p1, p2 = Player("P1", r1), Player("P2", r2)
        elo.record_match(p1, 3, p2, 1)
        d1, d2 = p1.rating - r1, p2.rating - r2
        assert d1 >= 0 and d2 <= 0
        assert abs(abs(d1) - abs(d2)) <= 1


def test_apply_match_returns_applied_changes():
    alice, carol = Player("Alice", 516), Player("Carol")

    winner, change1, change2 = elo.apply_match(alice, 10, carol, 21)

    assert winner == "Carol"
    assert (change1, change2) == (-17, 17)
