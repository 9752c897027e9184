# ABOUTME: Resolves a Pokemon's aggregate defensive profile from its one or two types.
# ABOUTME: Applies immunity > resistance > weakness precedence and finds double weaknesses/resistances.

from collections.abc import Iterable
from dataclasses import dataclass

from soullink.team.dataclasses import Pokemon
from soullink.utils.type_chart import get_entry, normalize_types


@dataclass(frozen=True)
class EffectivenessResult:
    """Attacking types grouped by how they fare against a defender.

    Attributes:
        weaknesses: Types the defender is weak to, after precedence is applied.
        resistances: Types the defender resists, after precedence is applied.
        immunities: Types the defender takes no damage from.
        double_weaknesses: Types both of the defender's types are weak to (4x).
        double_resistances: Types both of the defender's types resist (0.25x).
    """

    weaknesses: frozenset[str] = frozenset()
    resistances: frozenset[str] = frozenset()
    immunities: frozenset[str] = frozenset()
    double_weaknesses: frozenset[str] = frozenset()
    double_resistances: frozenset[str] = frozenset()


def resolve_effectiveness(types: Iterable[str | None]) -> EffectivenessResult:
    """Compute the defensive profile for a monotype or dual-type Pokemon.

    Args:
        types: The defender's types in any case. None and duplicate entries are ignored.

    Returns:
        EffectivenessResult. Unknown types contribute nothing.
    """
    defending_types = normalize_types(types)
    entries = [get_entry(t) for t in defending_types]

    weaknesses: set[str] = set()
    resistances: set[str] = set()
    immunities: set[str] = set()
    for entry in entries:
        weaknesses |= entry.weak_to
        resistances |= entry.resistant_to
        immunities |= entry.immune_to

    # Immunity beats resistance beats weakness
    weaknesses -= resistances
    weaknesses -= immunities
    resistances -= immunities

    double_weaknesses: frozenset[str] = frozenset()
    double_resistances: frozenset[str] = frozenset()
    if len(entries) == 2:
        first, second = entries
        double_weaknesses = first.weak_to & second.weak_to
        double_resistances = first.resistant_to & second.resistant_to

    return EffectivenessResult(
        weaknesses=frozenset(weaknesses),
        resistances=frozenset(resistances),
        immunities=frozenset(immunities),
        double_weaknesses=double_weaknesses,
        double_resistances=double_resistances,
    )


def resolve_pokemon_effectiveness(pokemon: Pokemon) -> EffectivenessResult:
    """Compute the defensive profile of a tracked Pokemon from its types."""
    return resolve_effectiveness(pokemon.types)
