"""Type hints used in Swiss Pairing."""

from typing import List, Literal, Optional, Tuple, Union

# Player identity, a dense registration index
PlayerId = int

# Sentinel literals (for type hints)
Bye = Literal["bye"]
Draw = Literal["draw"]

# Second seat of a match: a player or the bye
OpponentId = Union[PlayerId, Bye]
# Who took the match; None while the result is pending
WinnerId = Optional[Union[PlayerId, Draw, Bye]]

TournamentStatus = Literal["setup", "in_progress", "completed"]
MatchOutcome = Literal["Win", "Loss", "Draw", "Pending"]

# List of players
Players = List["Player"]
# List of rounds
Rounds = List["Round"]
# Two players sitting at the same table
Pairing = Tuple["Player", "Player"]
MaybePlayer = Optional["Player"]

#  LocalWords:  OpponentId WinnerId
