"""ABOUTME: Data classes for soul-link pairs and the Pokemon that make them up.
ABOUTME: Contains Pokemon, Pair, LifeStatus, PlayerSide, and the Combination alias."""

from dataclasses import dataclass
from enum import Enum, IntEnum

from soullink.utils.type_chart import normalize_type, normalize_types


class LifeStatus(str, Enum):
    """Whether a linked pair is still usable in the run."""

    ALIVE = "Alive"
    DEAD = "Dead"


class PlayerSide(IntEnum):
    """Which player's half of each pair is being looked at."""

    PLAYER1 = 1
    PLAYER2 = 2


@dataclass(frozen=True)
class Pokemon:
    """A single caught Pokemon as supplied by the run tracker.

    Attributes:
        id: Unique identifier of this Pokemon.
        name: Display name (nickname or species name).
        species_key: Key used for species clause checks (e.g., "charmander").
        primary_type: Primary type, any case. None when unknown.
        secondary_type: Secondary type, any case. None for monotypes.
        custom: True for fakemon / custom entries not in the regular dex.
        notes: Free-form notes, ignored by all calculations.
    """

    id: str
    name: str
    species_key: str
    primary_type: str | None = None
    secondary_type: str | None = None
    custom: bool = False
    notes: str = ""

    @property
    def types(self) -> tuple[str, ...]:
        """Lowercase types of this Pokemon, primary first, without duplicates."""
        return normalize_types((self.primary_type, self.secondary_type))


@dataclass(frozen=True)
class Pair:
    """Two Pokemon linked across both players' games.

    Attributes:
        id: Unique identifier of this pair.
        player1: Player 1's Pokemon.
        player2: Player 2's Pokemon.
        status: Life status; dead pairs are not eligible for teams.
    """

    id: str
    player1: Pokemon
    player2: Pokemon
    status: LifeStatus = LifeStatus.ALIVE

    @property
    def species_keys(self) -> frozenset[str]:
        """Species keys of both members."""
        return frozenset((self.player1.species_key, self.player2.species_key))

    @property
    def primary_types(self) -> frozenset[str]:
        """Lowercase primary types of both members, missing types excluded."""
        types = (normalize_type(self.player1.primary_type), normalize_type(self.player2.primary_type))
        return frozenset(t for t in types if t is not None)

    @property
    def is_alive(self) -> bool:
        """True if the pair is still alive."""
        return self.status == LifeStatus.ALIVE

    @property
    def has_custom(self) -> bool:
        """True if either member is a custom Pokemon."""
        return self.player1.custom or self.player2.custom

    def member(self, side: PlayerSide) -> Pokemon:
        """Return the member belonging to the given player."""
        return self.player1 if side == PlayerSide.PLAYER1 else self.player2


# A legal team: required pairs first, then the chosen optional pairs.
Combination = tuple[Pair, ...]
