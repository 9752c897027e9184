"""ABOUTME: Enumerates legal soul-link teams from a pool of pairs.
ABOUTME: Backtracking search with species/primary type clauses, pinned pairs, and a result cap."""

import logging
from collections.abc import Sequence

from soullink.settings import settings
from soullink.team.constraints import SoulLinkConstraints
from soullink.team.dataclasses import Combination, Pair
from soullink.utils.type_chart import normalize_type

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when search constraints cannot be satisfied by construction."""


def _violates_clauses(
    pair: Pair,
    constraints: SoulLinkConstraints,
    used_species: frozenset[str],
    used_types: frozenset[str],
) -> bool:
    """Check whether adding a pair would break an active clause.

    Args:
        pair: Candidate pair.
        constraints: Active clauses.
        used_species: Species keys already on the team.
        used_types: Lowercase primary types already on the team.

    Returns:
        True if the pair must be skipped.
    """
    if constraints.species_clause and not used_species.isdisjoint(pair.species_keys):
        return True

    if constraints.primary_type_clause:
        # Both members need a known primary type for the clause to be checked
        if normalize_type(pair.player1.primary_type) is None or normalize_type(pair.player2.primary_type) is None:
            return True
        if not used_types.isdisjoint(pair.primary_types):
            return True

    return False


def _collect_teams(
    optional: Sequence[Pair],
    start: int,
    slots: int,
    constraints: SoulLinkConstraints,
    used_species: frozenset[str],
    used_types: frozenset[str],
    team: tuple[Pair, ...],
    results: list[tuple[Pair, ...]],
    max_results: int,
) -> None:
    """Extend `team` with pairs from `optional[start:]` until `slots` pairs are chosen.

    Completed teams are appended to `results`. Only later indices are tried at each
    level, so every subset is produced once, in lexicographic index order.
    """
    if len(results) >= max_results:
        return

    if len(team) == slots:
        results.append(team)
        return

    for index in range(start, len(optional)):
        if len(results) >= max_results:
            return
        # Not enough pairs left to fill the team from here on
        if len(optional) - index < slots - len(team):
            return

        pair = optional[index]
        if _violates_clauses(pair, constraints, used_species, used_types):
            continue

        _collect_teams(
            optional,
            index + 1,
            slots,
            constraints,
            used_species | pair.species_keys,
            used_types | pair.primary_types,
            (*team, pair),
            results,
            max_results,
        )


def search_combinations(
    pool: Sequence[Pair],
    constraints: SoulLinkConstraints,
    max_results: int | None = None,
) -> list[Combination]:
    """Enumerate all legal teams that can be built from a pool of pairs.

    Required pairs are taken as-is (never checked against each other) and seed
    the used species and types; the remaining slots are filled from the other
    pairs in pool order.

    Args:
        pool: Eligible pairs in display order. Dead/custom filtering is up to the caller.
        constraints: Clauses, team size, and required pair ids.
        max_results: Maximum number of teams to return. Defaults to settings.MAX_COMBINATIONS.

    Returns:
        Teams as tuples of pairs, required pairs first. Empty if no legal team exists.

    Raises:
        ConfigurationError: If more pairs are required than fit in a team, or the cap is not positive.
    """
    if max_results is None:
        max_results = settings.MAX_COMBINATIONS

    if max_results < 1:
        raise ConfigurationError(f"Result cap must be positive, got {max_results}")

    if len(constraints.required_pair_ids) > constraints.team_size:
        raise ConfigurationError(
            f"{len(constraints.required_pair_ids)} pairs are required, "
            f"but the team size is {constraints.team_size}. "
            "Reduce the required pairs or increase the team size."
        )

    required = [pair for pair in pool if pair.id in constraints.required_pair_ids]
    optional = [pair for pair in pool if pair.id not in constraints.required_pair_ids]

    used_species: frozenset[str] = frozenset()
    used_types: frozenset[str] = frozenset()
    for pair in required:
        used_species |= pair.species_keys
        used_types |= pair.primary_types

    slots = constraints.team_size - len(required)
    logger.debug(
        "Searching %d-pair teams: %d required, %d optional, %d open slots",
        constraints.team_size,
        len(required),
        len(optional),
        slots,
    )

    chosen: list[tuple[Pair, ...]] = []
    _collect_teams(optional, 0, slots, constraints, used_species, used_types, (), chosen, max_results)

    if len(chosen) >= max_results:
        logger.info("Combination search reached the cap of %d teams", max_results)
    logger.debug("Found %d combinations", len(chosen))

    return [(*required, *team) for team in chosen]
