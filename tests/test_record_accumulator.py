import pytest

from conftest import make_match, make_teams

from bowlstandings.exceptions import DuplicateTeamException, UnknownTeamException
from bowlstandings.tournament import BallotResolver, RecordAccumulator


def _outcomes(*matches):
    resolver = BallotResolver(3)
    return [resolver.resolve(m) for m in matches]


def test_both_sides_are_credited():
    outcomes = _outcomes(make_match("M1", 1, "A", "B", 2, 15))

    records = RecordAccumulator().accumulate(make_teams("A", "B"), outcomes)

    assert records["A"].win_share == 1.0
    assert records["A"].score_differential == 15.0
    assert records["A"].votes == 2.0
    assert records["B"].win_share == 0.0
    assert records["B"].score_differential == -15.0
    assert records["B"].votes == 1.0
    assert records["A"].matches_played == records["B"].matches_played == 1


def test_teams_without_matches_keep_zero_records():
    outcomes = _outcomes(make_match("M1", 1, "A", "B", 2, 15))

    records = RecordAccumulator().accumulate(make_teams("A", "B", "C"), outcomes)

    assert set(records) == {"A", "B", "C"}
    idle = records["C"]
    assert idle.matches_played == 0
    assert idle.win_share == 0.0
    assert idle.score_differential == 0.0
    assert idle.votes == 0.0
    assert idle.opponent_results == []


def test_opponent_results_follow_the_schedule():
    outcomes = _outcomes(
        make_match("M1", 1, "A", "B", 2, 5),
        make_match("M2", 2, "B", "A", 1.5, 0),
        make_match("M3", 3, "A", "C", 0, -9),
    )

    records = RecordAccumulator().accumulate(make_teams("A", "B", "C"), outcomes)

    against_b = records["A"].results_against("B")
    assert [r.win_share for r in against_b] == [1.0, 0.5]
    assert [r.match_id for r in against_b] == ["M1", "M2"]
    assert records["A"].results_against("C")[0].win_share == 0.0
    assert records["C"].results_against("A")[0].win_share == 1.0
    assert records["B"].results_against("C") == []


def test_round_bound_drops_later_rounds():
    outcomes = _outcomes(
        make_match("M1", 1, "A", "B", 2, 5),
        make_match("M2", 2, "A", "B", 0, -5),
    )

    records = RecordAccumulator().accumulate(make_teams("A", "B"), outcomes, through_round=1)

    assert records["A"].win_share == 1.0
    assert records["A"].matches_played == 1


def test_unknown_team_is_reported():
    outcomes = _outcomes(make_match("M1", 1, "A", "Z", 2, 5))

    with pytest.raises(UnknownTeamException):
        RecordAccumulator().accumulate(make_teams("A", "B"), outcomes)


def test_duplicate_team_ids_are_reported():
    teams = make_teams("A", "B") + make_teams("A")

    with pytest.raises(DuplicateTeamException):
        RecordAccumulator().accumulate(teams, [])

def test_unknown_team_leaves_records_untouched():
    accumulator = RecordAccumulator()
    records = accumulator.accumulate(make_teams("A", "B"), [])
    (outcome,) = _outcomes(make_match("M1", 1, "A", "Z", 2, 5))

    with pytest.raises(UnknownTeamException):
        accumulator.add_outcome(records, outcome)

    assert records["A"].matches_played == 0


def test_total_win_share_matches_outcome_count(fixture_snapshot):
    resolver = BallotResolver(3)
    outcomes = [resolver.resolve(m) for m in fixture_snapshot.matches]

    records = RecordAccumulator().accumulate(fixture_snapshot.teams, outcomes)

    assert sum(r.win_share for r in records.values()) == len(outcomes)
    expected = {"A": 3.5, "B": 3.5, "C": 3.0, "E": 3.0, "D": 1.5, "F": 0.5, "G": 0.5, "H": 0.5}
    assert {team_id: r.win_share for team_id, r in records.items()} == expected
