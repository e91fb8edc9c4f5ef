"""
Race module.

Compares two independent traversals of the same problem:
- judge_race: Decides a winner from two finished results
- RaceReplay: Shared replay cursor with a deferred verdict
- run_race: Runs both sides and returns a RaceReplay
- describe_matchup: Explains what a pairing can show
"""

from pathrace.race.judge import Verdict, judge_race
from pathrace.race.replay import RaceReplay, run_race
from pathrace.race.rules import Matchup, describe_matchup

__all__ = [
    "Verdict",
    "judge_race",
    "RaceReplay",
    "run_race",
    "Matchup",
    "describe_matchup",
]
