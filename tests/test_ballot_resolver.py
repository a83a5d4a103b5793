import pytest

from conftest import make_ballots, make_match

from bowlstandings.exceptions import (
    DataIntegrityException,
    IncompleteBallotSetException,
    InvalidConfigurationException,
    MatchNotCompletedException,
    MissingConfigurationException,
    PendingBallotException,
)
from bowlstandings.models import Ballot, Match, MatchStatus, ScoreSheet
from bowlstandings.tournament import BallotResolver


def test_majority_takes_the_match():
    resolver = BallotResolver(panel_size=3)
    outcome = resolver.resolve(make_match("M1", 1, "A", "D", 2, 15))

    assert outcome.votes_a == 2.0
    assert outcome.votes_b == 1.0
    assert outcome.win_share_a == 1.0
    assert outcome.win_share_b == 0.0
    assert outcome.score_differential == 15.0
    assert not outcome.is_draw


def test_minority_loses_the_match():
    outcome = BallotResolver(3).resolve(make_match("M1", 1, "A", "E", 1, -10))

    assert outcome.win_share_a == 0.0
    assert outcome.win_share_b == 1.0
    assert outcome.score_differential == -10.0


def test_declared_tie_splits_the_vote():
    outcome = BallotResolver(3).resolve(make_match("M1", 1, "B", "E", 2.5, 22))

    assert outcome.votes_a == 2.5
    assert outcome.votes_b == 0.5
    assert outcome.win_share_a == 1.0


def test_level_votes_draw_the_match():
    outcome = BallotResolver(3).resolve(make_match("M1", 1, "G", "H", 1.5, 0))

    assert outcome.votes_a == outcome.votes_b == 1.5
    assert outcome.win_share_a == outcome.win_share_b == 0.5
    assert outcome.is_draw


def test_even_panel_can_draw_without_declared_ties():
    ballots = (
        Ballot("J1", "A", 90, 80),
        Ballot("J2", "B", 70, 85),
    )
    match = Match("M1", 1, "A", "B", MatchStatus.COMPLETED, ballots)
    outcome = BallotResolver(2).resolve(match)

    assert outcome.win_share_a == 0.5
    assert outcome.score_a == 160
    assert outcome.score_b == 165
    assert outcome.score_differential == -5


@pytest.mark.parametrize("votes_a", [0, 0.5, 1, 1.5, 2, 2.5, 3])
def test_win_shares_always_sum_to_one(votes_a):
    outcome = BallotResolver(3).resolve(make_match("M1", 1, "A", "B", votes_a, 3))

    assert outcome.win_share_a + outcome.win_share_b == 1.0
    assert outcome.votes_a + outcome.votes_b == 3


def test_scores_are_summed_over_judges():
    ballots = (
        Ballot("J1", "A", 41.5, 40),
        Ballot("J2", "A", 44, 39),
        Ballot("J3", "B", 38, 42.25),
    )
    match = Match("M1", 1, "A", "B", MatchStatus.COMPLETED, ballots)
    outcome = BallotResolver(3).resolve(match)

    assert outcome.score_a == pytest.approx(123.5)
    assert outcome.score_b == pytest.approx(121.25)
    assert outcome.score_differential == pytest.approx(2.25)


def test_incomplete_match_is_rejected():
    match = make_match("M1", 1, "A", "B", 2, 5, status=MatchStatus.IN_PROGRESS)

    with pytest.raises(MatchNotCompletedException):
        BallotResolver(3).resolve(match)


def test_missing_ballot_is_rejected():
    ballots = make_ballots("A", "B", 2, 5)[:2]
    match = Match("M1", 1, "A", "B", MatchStatus.COMPLETED, ballots)

    with pytest.raises(IncompleteBallotSetException):
        BallotResolver(3).resolve(match)


def test_extra_ballot_is_rejected():
    ballots = make_ballots("A", "B", 2, 5) + (Ballot("J4", "A", 80, 70),)
    match = Match("M1", 1, "A", "B", MatchStatus.COMPLETED, ballots)

    with pytest.raises(IncompleteBallotSetException):
        BallotResolver(3).resolve(match)


def test_unfinalized_ballot_is_rejected():
    ballots = make_ballots("A", "B", 2, 5)[:2] + (
        Ballot("J3", "A", 80, 70, is_submitted=False),
    )
    match = Match("M1", 1, "A", "B", MatchStatus.COMPLETED, ballots)

    with pytest.raises(PendingBallotException):
        BallotResolver(3).resolve(match)


def test_ballot_for_outside_team_is_rejected():
    ballots = make_ballots("A", "B", 2, 5)[:2] + (Ballot("J3", "Z", 80, 70),)
    match = Match("M1", 1, "A", "B", MatchStatus.COMPLETED, ballots)

    with pytest.raises(DataIntegrityException):
        BallotResolver(3).resolve(match)


def test_duplicate_judge_is_rejected():
    ballots = (
        Ballot("J1", "A", 80, 70),
        Ballot("J1", "A", 80, 70),
        Ballot("J2", "B", 70, 80),
    )
    match = Match("M1", 1, "A", "B", MatchStatus.COMPLETED, ballots)

    with pytest.raises(DataIntegrityException):
        BallotResolver(3).resolve(match)


def test_team_against_itself_is_rejected():
    match = make_match("M1", 1, "A", "A", 2, 5)

    with pytest.raises(DataIntegrityException):
        BallotResolver(3).resolve(match)


def test_non_numeric_score_is_rejected():
    ballots = make_ballots("A", "B", 2, 5)[:2] + (Ballot("J3", "A", float("nan"), 70),)
    match = Match("M1", 1, "A", "B", MatchStatus.COMPLETED, ballots)

    with pytest.raises(DataIntegrityException):
        BallotResolver(3).resolve(match)


def test_panel_size_must_be_given():
    with pytest.raises(MissingConfigurationException):
        BallotResolver(None)
    with pytest.raises(InvalidConfigurationException):
        BallotResolver(0)


def test_simulated_third_judge_breaks_a_split_panel():
    ballots = (
        Ballot("J1", "A", 90, 80),
        Ballot("J2", "B", 78, 82),
    )
    match = Match("M1", 1, "A", "B", MatchStatus.COMPLETED, ballots)
    outcome = BallotResolver(2, simulate_third_judge=True).resolve(match)

    # Means are 84 vs 81, so the simulated judge votes for A
    assert outcome.simulated_ballot
    assert outcome.votes_a == 2.0
    assert outcome.votes_b == 1.0
    assert outcome.win_share_a == 1.0
    assert outcome.score_a == pytest.approx(168 + 84)
    assert outcome.score_b == pytest.approx(162 + 81)


def test_simulated_third_judge_ties_on_equal_means():
    ballots = (
        Ballot("J1", "A", 90, 80),
        Ballot("J2", "B", 80, 90),
    )
    match = Match("M1", 1, "A", "B", MatchStatus.COMPLETED, ballots)
    outcome = BallotResolver(2, simulate_third_judge=True).resolve(match)

    assert outcome.votes_a == outcome.votes_b == 1.5
    assert outcome.is_draw


def test_simulated_judge_only_applies_to_two_judge_panels():
    resolver = BallotResolver(3, simulate_third_judge=True)
    outcome = resolver.resolve(make_match("M1", 1, "A", "B", 2, 5))

    assert not resolver.uses_simulated_judge
    assert not outcome.simulated_ballot
    assert outcome.votes_a + outcome.votes_b == 3


def test_ballot_from_score_sheets():
    sheet_a = ScoreSheet(criteria_scores={"clarity": 8, "depth": 7}, comment_scores=(6, 8))
    sheet_b = ScoreSheet(criteria_scores={"clarity": 9, "depth": 5}, comment_scores=(5,))

    ballot = Ballot.from_score_sheets("J1", "A", "B", sheet_a, sheet_b)

    assert sheet_a.total == 22
    assert sheet_b.total == 19
    assert ballot.favored_team_id == "A"
    assert ballot.score_a == 22
    assert ballot.score_b == 19


def test_equal_score_sheets_declare_a_tie():
    sheet = ScoreSheet(criteria_scores={"clarity": 8})

    ballot = Ballot.from_score_sheets("J1", "A", "B", sheet, sheet)

    assert ballot.is_tie
