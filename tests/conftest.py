import pytest

from bowlstandings.models import Ballot, Match, MatchStatus, Team, TournamentSnapshot

BASE_SCORE = 80.0

# (team A, team B, votes for A, score differential for A), three-judge panels
FIXTURE_RESULTS = [
    ("A", "D", 2, 15),
    ("B", "E", 2.5, 22),
    ("C", "F", 3, 18),
    ("G", "H", 1.5, 0),
    ("A", "E", 1, -10),
    ("B", "F", 2, 14),
    ("C", "D", 1, -12),
    ("A", "F", 2.5, 20),
    ("B", "D", 2, 11),
    ("C", "E", 2, 11),
    ("A", "B", 1.5, 0),
    ("C", "D", 2, 8),
    ("E", "F", 2, 16),
    ("A", "C", 2, 9),
    ("B", "E", 1, -8),
    ("D", "F", 1.5, 0),
]


def make_ballots(team_a_id, team_b_id, votes_a, differential, panel_size=3):
    """Ballots giving A ``votes_a`` votes and a total differential of ``differential``.

    Half a vote becomes one declared tie; the whole differential sits on the
    first ballot.
    """
    wins_a = int(votes_a)
    ties = 1 if votes_a - wins_a else 0
    wins_b = panel_size - wins_a - ties
    verdicts = [team_a_id] * wins_a + [None] * ties + [team_b_id] * wins_b

    ballots = []
    for index, favored in enumerate(verdicts):
        offset = differential if index == 0 else 0
        ballots.append(
            Ballot(
                judge_id=f"J{index + 1}",
                favored_team_id=favored,
                score_a=BASE_SCORE + offset,
                score_b=BASE_SCORE,
            )
        )
    return tuple(ballots)


def make_match(match_id, round_number, team_a_id, team_b_id, votes_a, differential, **kwargs):
    """A completed match unless ``status`` says otherwise.

    ``panel_size`` sets the number of ballots and is recorded on the match.
    """
    ballot_count = kwargs.get("panel_size") or 3
    return Match(
        match_id=match_id,
        round_number=round_number,
        team_a_id=team_a_id,
        team_b_id=team_b_id,
        status=kwargs.pop("status", MatchStatus.COMPLETED),
        ballots=make_ballots(team_a_id, team_b_id, votes_a, differential, ballot_count),
        **kwargs,
    )


def make_teams(*team_ids):
    return tuple(Team(team_id=team_id, name=f"Team {team_id}") for team_id in team_ids)


@pytest.fixture
def fixture_snapshot():
    """Eight teams over five rounds on a partial schedule."""
    matches = []
    for index, (team_a, team_b, votes_a, differential) in enumerate(FIXTURE_RESULTS):
        round_number = index // 3 + 1 if index < 15 else 5
        matches.append(
            make_match(f"M{index + 1:02d}", round_number, team_a, team_b, votes_a, differential)
        )
    return TournamentSnapshot(
        tournament_id="ethics-2025",
        teams=make_teams("A", "B", "C", "D", "E", "F", "G", "H"),
        matches=tuple(matches),
        panel_size=3,
        name="Regional Ethics Bowl",
    )
