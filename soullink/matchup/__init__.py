# ABOUTME: Type matchup module for soul-link battles.
# ABOUTME: Defensive profile resolution and damage multiplier classification.

from soullink.matchup.classifier import (
    MatchupRating,
    MatchupSummary,
    Perspective,
    analyze_matchup,
    classify_against_type,
    classify_damage,
    offensive_multiplier,
    rate_against_types,
)
from soullink.matchup.effectiveness import (
    EffectivenessResult,
    resolve_effectiveness,
    resolve_pokemon_effectiveness,
)

__all__ = [
    "EffectivenessResult",
    "MatchupRating",
    "MatchupSummary",
    "Perspective",
    "analyze_matchup",
    "classify_against_type",
    "classify_damage",
    "offensive_multiplier",
    "rate_against_types",
    "resolve_effectiveness",
    "resolve_pokemon_effectiveness",
]
