"""ABOUTME: Configuration loaders for soul-link run files.
ABOUTME: Handles loading and parsing of a run's pairs and team constraints from YAML."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from soullink.settings import settings
from soullink.team.constraints import SoulLinkConstraints
from soullink.team.dataclasses import LifeStatus, Pair, PlayerSide, Pokemon


class PokemonConfig(BaseModel):
    """Configuration for a single Pokemon in a pair."""

    id: str
    name: str
    species_key: str
    primary_type: str | None = None
    secondary_type: str | None = None
    custom: bool = False
    notes: str = ""

    def to_pokemon(self) -> Pokemon:
        """Convert to the Pokemon data class used by the calculations."""
        return Pokemon(
            id=self.id,
            name=self.name,
            species_key=self.species_key,
            primary_type=self.primary_type,
            secondary_type=self.secondary_type,
            custom=self.custom,
            notes=self.notes,
        )


class PairConfig(BaseModel):
    """Configuration for a linked pair."""

    id: str
    player1: PokemonConfig
    player2: PokemonConfig
    status: LifeStatus = LifeStatus.ALIVE

    def to_pair(self) -> Pair:
        """Convert to the Pair data class used by the calculations."""
        return Pair(
            id=self.id,
            player1=self.player1.to_pokemon(),
            player2=self.player2.to_pokemon(),
            status=self.status,
        )


class RunConfig(BaseModel):
    """A soul-link run: tracked pairs, team rules, and the active player side."""

    constraints: SoulLinkConstraints = SoulLinkConstraints()
    pairs: list[PairConfig] = []
    player_side: PlayerSide = PlayerSide.PLAYER1

    def get_pairs(self) -> list[Pair]:
        """Return all pairs in file order."""
        return [pair.to_pair() for pair in self.pairs]

    def get_pair(self, pair_id: str) -> Pair:
        """Look up a pair by id.

        Args:
            pair_id: Id of the pair as defined in the run file.

        Returns:
            The matching Pair.

        Raises:
            KeyError: If no pair has this id.
        """
        for pair in self.pairs:
            if pair.id == pair_id:
                return pair.to_pair()
        raise KeyError(f"Pair '{pair_id}' not found in run")


def load_run_config(config_path: Path | None = None) -> RunConfig:
    """Load a run from a YAML file.

    Args:
        config_path: Path to the run file. Defaults to settings.run_config_path.

    Returns:
        Parsed RunConfig object.

    Raises:
        FileNotFoundError: If the run file doesn't exist.
        pydantic.ValidationError: If the run file is invalid.
    """
    if config_path is None:
        config_path = settings.run_config_path

    if not config_path.exists():
        raise FileNotFoundError(f"Run file not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        raw_config = yaml.safe_load(f) or {}

    return RunConfig.model_validate(raw_config)
