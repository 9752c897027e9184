# ABOUTME: Pokemon type chart for Gen 6+ (18 types including Fairy), keyed by defending type.
# ABOUTME: Each entry lists the attacking types the defender is weak to, resists, and is immune to.

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

TYPES: tuple[str, ...] = (
    "normal",
    "fire",
    "water",
    "electric",
    "grass",
    "ice",
    "fighting",
    "poison",
    "ground",
    "flying",
    "psychic",
    "bug",
    "rock",
    "ghost",
    "dragon",
    "dark",
    "steel",
    "fairy",
)


@dataclass(frozen=True)
class TypeChartEntry:
    """Defensive profile of a single type.

    Attributes:
        weak_to: Attacking types dealing 2x damage.
        resistant_to: Attacking types dealing 0.5x damage.
        immune_to: Attacking types dealing no damage.
    """

    weak_to: frozenset[str] = frozenset()
    resistant_to: frozenset[str] = frozenset()
    immune_to: frozenset[str] = frozenset()


def _entry(weak_to: tuple[str, ...], resistant_to: tuple[str, ...], immune_to: tuple[str, ...] = ()) -> TypeChartEntry:
    return TypeChartEntry(frozenset(weak_to), frozenset(resistant_to), frozenset(immune_to))


# Defending type -> entry
TYPE_CHART: MappingProxyType[str, TypeChartEntry] = MappingProxyType(
    {
        "normal": _entry(("fighting",), (), ("ghost",)),
        "fire": _entry(("water", "ground", "rock"), ("fire", "grass", "ice", "bug", "steel", "fairy")),
        "water": _entry(("electric", "grass"), ("fire", "water", "ice", "steel")),
        "electric": _entry(("ground",), ("electric", "flying", "steel")),
        "grass": _entry(("fire", "ice", "poison", "flying", "bug"), ("water", "electric", "grass", "ground")),
        "ice": _entry(("fire", "fighting", "rock", "steel"), ("ice",)),
        "fighting": _entry(("flying", "psychic", "fairy"), ("bug", "rock", "dark")),
        "poison": _entry(("ground", "psychic"), ("grass", "fighting", "poison", "bug", "fairy")),
        "ground": _entry(("water", "grass", "ice"), ("poison", "rock"), ("electric",)),
        "flying": _entry(("electric", "ice", "rock"), ("grass", "fighting", "bug"), ("ground",)),
        "psychic": _entry(("bug", "ghost", "dark"), ("fighting", "psychic")),
        "bug": _entry(("fire", "flying", "rock"), ("grass", "fighting", "ground")),
        "rock": _entry(("water", "grass", "fighting", "ground", "steel"), ("normal", "fire", "poison", "flying")),
        "ghost": _entry(("ghost", "dark"), ("poison", "bug"), ("normal", "fighting")),
        "dragon": _entry(("ice", "dragon", "fairy"), ("fire", "water", "electric", "grass")),
        "dark": _entry(("fighting", "bug", "fairy"), ("ghost", "dark"), ("psychic",)),
        "steel": _entry(
            ("fire", "fighting", "ground"),
            ("normal", "grass", "ice", "flying", "psychic", "bug", "rock", "dragon", "steel", "fairy"),
            ("poison",),
        ),
        "fairy": _entry(("poison", "steel"), ("fighting", "bug", "dark"), ("dragon",)),
    }
)

_EMPTY_ENTRY = TypeChartEntry()


def normalize_type(type_name: str | None) -> str | None:
    """Canonicalize a type name to the chart's lowercase form.

    Args:
        type_name: Type name in any case, or None.

    Returns:
        Lowercase, stripped type name, or None for a missing/blank name.
    """
    if type_name is None:
        return None
    normalized = type_name.strip().lower()
    return normalized or None


def normalize_types(type_names: Iterable[str | None]) -> tuple[str, ...]:
    """Normalize a sequence of type names, dropping blanks and duplicates.

    Order of first appearance is kept, so ("Fire", "fire", None, "Flying")
    becomes ("fire", "flying").
    """
    seen: dict[str, None] = {}
    for type_name in type_names:
        normalized = normalize_type(type_name)
        if normalized is not None:
            seen.setdefault(normalized, None)
    return tuple(seen)


def get_entry(type_name: str | None) -> TypeChartEntry:
    """Return the chart entry for a type.

    Unknown or missing types get an empty entry rather than an error, so they
    contribute nothing to any matchup.
    """
    normalized = normalize_type(type_name)
    if normalized is None:
        return _EMPTY_ENTRY
    return TYPE_CHART.get(normalized, _EMPTY_ENTRY)


def is_known_type(type_name: str | None) -> bool:
    """Return True if the type is one of the 18 chart types."""
    return normalize_type(type_name) in TYPE_CHART
