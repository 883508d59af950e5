from __future__ import annotations

from bgplanner.services.game_list import GameList
from bgplanner.services.operations import Operation
from bgplanner.services.planner import Planner
from bgplanner.services.predicate import Predicate, PredicateOutcome

__all__: list[str] = [
    "GameList",
    "Operation",
    "Planner",
    "Predicate",
    "PredicateOutcome",
]
