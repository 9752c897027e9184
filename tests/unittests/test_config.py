"""ABOUTME: Tests for the config module.
ABOUTME: Verifies run file loading and conversion to pairs and constraints."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from soullink.config import RunConfig, load_run_config
from soullink.team import LifeStatus, PlayerSide, SoulLinkConstraints


class TestRunConfig:
    """Tests for RunConfig class."""

    def test_defaults(self) -> None:
        """An empty run uses the default constraints."""
        run = RunConfig()

        assert run.constraints == SoulLinkConstraints()
        assert run.constraints.team_size == 6
        assert run.constraints.species_clause
        assert run.constraints.primary_type_clause
        assert run.get_pairs() == []
        assert run.player_side == PlayerSide.PLAYER1

    def test_get_pair_unknown(self) -> None:
        """Unknown pair id raises KeyError."""
        with pytest.raises(KeyError):
            RunConfig().get_pair("missing")

    def test_invalid_team_size(self) -> None:
        """Team size must be positive."""
        with pytest.raises(ValidationError):
            RunConfig.model_validate({"constraints": {"team_size": 0}})


class TestLoadRunConfig:
    """Tests for load_run_config function."""

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Missing run file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_run_config(tmp_path / "nonexistent.yml")

    def test_load_sample_run(self, sample_run_path: Path) -> None:
        """Sample run is parsed correctly."""
        run = load_run_config(sample_run_path)

        assert run.constraints.team_size == 3
        assert run.constraints.required_pair_ids == {"route-1"}
        assert not run.constraints.allow_custom_pokemon
        assert len(run.pairs) == 6

        route_3 = run.get_pair("route-3")
        assert route_3.status == LifeStatus.DEAD
        assert route_3.player2.types == ("normal", "fairy")

        cerulean = run.get_pair("cerulean")
        assert cerulean.has_custom

    def test_load_minimal_file(self, tmp_path: Path) -> None:
        """Valid YAML with a single pair is parsed correctly."""
        config_path = tmp_path / "run.yml"
        config_path.write_text("""
constraints:
  team_size: 1
pairs:
  - id: "p1"
    player1: {id: "a", name: "Eevee", species_key: "eevee", primary_type: "Normal"}
    player2: {id: "b", name: "Mew", species_key: "mew", primary_type: "Psychic"}
""")

        run = load_run_config(config_path)

        pairs = run.get_pairs()
        assert [p.id for p in pairs] == ["p1"]
        assert pairs[0].is_alive
        assert pairs[0].primary_types == {"normal", "psychic"}

    def test_load_empty_file(self, tmp_path: Path) -> None:
        """An empty file gives an empty run."""
        config_path = tmp_path / "run.yml"
        config_path.write_text("")

        assert load_run_config(config_path) == RunConfig()
