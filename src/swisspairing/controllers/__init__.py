from swisspairing.controllers.tournament import (
    ResultRecorder,
    RoundManager,
    TournamentController,
)

__all__ = ["ResultRecorder", "RoundManager", "TournamentController"]
