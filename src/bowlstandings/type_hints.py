"""Type hints used in Bowl Standings."""

from typing import Callable, Dict, List, Optional

# Favored team on a ballot, None for a declared tie
Verdict = Optional[str]

# Tiebreak keys in priority order
TiebreakOrder = List[str]

# Mapping of team id -> TeamRecord
TeamRecords = Dict[str, "TeamRecord"]
# Callback invoked with every computed report
StandingsListener = Callable[["StandingsReport"], None]
