# ABOUTME: Classifies type matchups into damage multipliers and display labels.
# ABOUTME: Covers multi-type offense/defense multipliers and single opposing type ratings.

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from soullink.matchup.effectiveness import EffectivenessResult
from soullink.utils.type_chart import get_entry, normalize_type, normalize_types

# Effectiveness thresholds
IMMUNITY_VALUE = 0.0
SUPER_EFFECTIVE_4X_THRESHOLD = 4.0
SUPER_EFFECTIVE_THRESHOLD = 2.0
QUAD_RESISTANCE_THRESHOLD = 0.25
RESISTANCE_THRESHOLD = 0.5


class Perspective(str, Enum):
    """Which side of the matchup a multiplier describes."""

    OFFENSE = "offense"
    DEFENSE = "defense"


class MatchupRating(str, Enum):
    """How a Pokemon fares defensively against a single opposing type."""

    IMMUNE = "immune"
    DOUBLE_RESIST = "double resist"
    RESISTS = "resists"
    DOUBLE_WEAK = "4x weak"
    WEAK = "weak"
    NEUTRAL = "neutral"


# Labels per perspective, in threshold order: immune, 4x, 2x, 0.25x, 0.5x, neutral
_DAMAGE_LABELS: dict[Perspective, tuple[str, str, str, str, str, str]] = {
    Perspective.OFFENSE: (
        "Immune (0x)",
        "Super Effective 4x",
        "Super Effective 2x",
        "Very Resisted ¼x",
        "Not Very Effective ½x",
        "Neutral",
    ),
    Perspective.DEFENSE: (
        "Immune (0x taken)",
        "4x Weak",
        "Weak (2x taken)",
        "Quad Resist ¼x",
        "Resist ½x",
        "Neutral",
    ),
}


@dataclass(frozen=True)
class MatchupSummary:
    """Both directions of a Pokemon vs opponent matchup.

    Attributes:
        offense_multiplier: Damage multiplier of my types against the opponent's.
        offense_label: Display label for offense_multiplier.
        defense_multiplier: Damage multiplier of the opponent's types against mine.
        defense_label: Display label for defense_multiplier.
    """

    offense_multiplier: float
    offense_label: str
    defense_multiplier: float
    defense_label: str


def offensive_multiplier(attacker_types: Iterable[str | None], defender_types: Iterable[str | None]) -> float:
    """Calculate the combined multiplier of all attacker types against all defender types.

    Every attacker type is applied against every defender type: 2x for a
    weakness, 0.5x for a resistance, and 0 for an immunity.

    Args:
        attacker_types: Attacking types, any case. Duplicates count once.
        defender_types: Defending types, any case. Duplicates count once.

    Returns:
        Effectiveness multiplier, e.g. 0, 0.25, 0.5, 1, 2, or 4.
    """
    attackers = normalize_types(attacker_types)
    multiplier = 1.0

    for def_type in normalize_types(defender_types):
        entry = get_entry(def_type)
        for atk_type in attackers:
            if atk_type in entry.weak_to:
                multiplier *= 2
            elif atk_type in entry.resistant_to:
                multiplier *= 0.5
            elif atk_type in entry.immune_to:
                multiplier = IMMUNITY_VALUE

    return multiplier


def classify_damage(multiplier: float, perspective: Perspective) -> str:
    """Map a damage multiplier to a display label.

    Args:
        multiplier: Multiplier from offensive_multiplier.
        perspective: OFFENSE when describing damage dealt, DEFENSE for damage taken.

    Returns:
        Label string, e.g. "Super Effective 2x" or "Resist ½x".
    """
    immune, quad, double, quarter, half, neutral = _DAMAGE_LABELS[Perspective(perspective)]

    if multiplier == IMMUNITY_VALUE:
        return immune
    if multiplier >= SUPER_EFFECTIVE_4X_THRESHOLD:
        return quad
    if multiplier >= SUPER_EFFECTIVE_THRESHOLD:
        return double
    if multiplier <= QUAD_RESISTANCE_THRESHOLD:
        return quarter
    if multiplier <= RESISTANCE_THRESHOLD:
        return half
    return neutral


def classify_against_type(effectiveness: EffectivenessResult, opposing_type: str) -> MatchupRating:
    """Rate a Pokemon's defensive profile against a single attacking type.

    Args:
        effectiveness: Result of resolve_effectiveness for the Pokemon.
        opposing_type: The attacking type, any case.

    Returns:
        The first matching rating in the order immune, double resist, resists,
        4x weak, weak, neutral.
    """
    atk_type = normalize_type(opposing_type)

    if atk_type in effectiveness.immunities:
        return MatchupRating.IMMUNE
    if atk_type in effectiveness.double_resistances:
        return MatchupRating.DOUBLE_RESIST
    if atk_type in effectiveness.resistances:
        return MatchupRating.RESISTS
    if atk_type in effectiveness.double_weaknesses:
        return MatchupRating.DOUBLE_WEAK
    if atk_type in effectiveness.weaknesses:
        return MatchupRating.WEAK
    return MatchupRating.NEUTRAL


def rate_against_types(
    effectiveness: EffectivenessResult,
    opposing_types: Iterable[str | None],
) -> dict[str, MatchupRating]:
    """Rate a defensive profile against each of several opposing types.

    Returns:
        Dict of lowercase opposing type -> rating, in the order given.
    """
    return {t: classify_against_type(effectiveness, t) for t in normalize_types(opposing_types)}


def analyze_matchup(my_types: Iterable[str | None], opponent_types: Iterable[str | None]) -> MatchupSummary:
    """Summarize offense and defense for my Pokemon against an opponent.

    Args:
        my_types: Types of my Pokemon.
        opponent_types: Types of the opposing Pokemon.

    Returns:
        MatchupSummary with both multipliers and their labels.
    """
    mine = normalize_types(my_types)
    theirs = normalize_types(opponent_types)

    offense = offensive_multiplier(mine, theirs)
    defense = offensive_multiplier(theirs, mine)

    return MatchupSummary(
        offense_multiplier=offense,
        offense_label=classify_damage(offense, Perspective.OFFENSE),
        defense_multiplier=defense,
        defense_label=classify_damage(defense, Perspective.DEFENSE),
    )
