"""ABOUTME: Team building module for soul-link runs.
ABOUTME: Pair data classes, team constraints, pool filtering, and the combination search."""

from soullink.team.combination_search import ConfigurationError, search_combinations
from soullink.team.constraints import SoulLinkConstraints
from soullink.team.dataclasses import Combination, LifeStatus, Pair, PlayerSide, Pokemon
from soullink.team.pool import eligible_pairs, side_members

__all__ = [
    "Combination",
    "ConfigurationError",
    "LifeStatus",
    "Pair",
    "PlayerSide",
    "Pokemon",
    "SoulLinkConstraints",
    "eligible_pairs",
    "search_combinations",
    "side_members",
]
