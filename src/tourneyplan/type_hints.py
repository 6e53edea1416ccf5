"""Type hints used in Tourney Plan."""

from typing import Any, Hashable, Literal, MutableSequence, Protocol

# Opaque player identifier owned by the caller's data store; only compared
# for equality and hashed.
PlayerId = Hashable

# Wire values of the closed enumerations (for type hints)
TournamentTypeValue = Literal[
    "LEAGUE", "KNOCKOUT", "GROUP_KNOCKOUT", "ROUND_ROBIN", "CUSTOM"
]
SeedingTypeValue = Literal["RANDOM", "RANKING", "CROSS_GROUP", "CUSTOM"]


class RandomSource(Protocol):
    """Anything that can shuffle a list in place, e.g. ``random.Random``."""

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


#  LocalWords:  PlayerId RandomSource
