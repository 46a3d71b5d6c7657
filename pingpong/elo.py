import math

K = 32  # Elo K-factor, fixed
DEFAULT_RATING = 500


def expected_score(rating, opponent_rating):
    """Win probability for a player rated `rating` against `opponent_rating`."""
    return 1 / (1 + math.pow(10, (opponent_rating - rating) / 400))


def round_half_away_from_zero(value):
    # round() in Python rounds halves to even
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def rating_change(rating, opponent_rating, won):
    actual = 1 if won else 0
    return round_half_away_from_zero(K * (actual - expected_score(rating, opponent_rating)))


def decide_winner(score1, score2):
    """Return 1 if player 1 has the strictly higher score, else 2 (ties go to player 2)."""
    return 1 if score1 > score2 else 2


def apply_match(player1, score1, player2, score2):
    """Apply one match to both players in place.

    Returns ``(winner_name, change1, change2)``. Both expectations come from
    the ratings before the match. Scores only decide who won; the margin does
    not change the size of the update.
    """
    player1.games_played += 1
    player2.games_played += 1

    player1_won = decide_winner(score1, score2) == 1

    rating1, rating2 = player1.rating, player2.rating
    change1 = rating_change(rating1, rating2, player1_won)
    change2 = rating_change(rating2, rating1, not player1_won)

    player1.rating += change1
    player2.rating += change2

    winner = player1.name if player1_won else player2.name
    return winner, change1, change2


def record_match(player1, score1, player2, score2):
    """Apply one match to both players in place and return the winner's name."""
    winner, _, _ = apply_match(player1, score1, player2, score2)
    return winner
