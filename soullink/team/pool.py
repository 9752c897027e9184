"""ABOUTME: Builds the pool of pairs eligible for team building.
ABOUTME: Filters out dead pairs and, optionally, pairs containing custom Pokemon."""

from collections.abc import Iterable, Sequence

from soullink.team.dataclasses import Pair, PlayerSide, Pokemon


def eligible_pairs(pairs: Iterable[Pair], allow_custom_pokemon: bool = True) -> list[Pair]:
    """Select the pairs that may take part in a combination search.

    Args:
        pairs: All tracked pairs, in display order.
        allow_custom_pokemon: If False, pairs where either member is custom are dropped.

    Returns:
        Alive pairs (and non-custom ones if requested), original order kept.
    """
    return [pair for pair in pairs if pair.is_alive and (allow_custom_pokemon or not pair.has_custom)]


def side_members(team: Sequence[Pair], side: PlayerSide) -> list[Pokemon]:
    """Return one player's half of every pair in a team.

    Args:
        team: A chosen combination of pairs.
        side: The player whose Pokemon should be returned.

    Returns:
        That player's Pokemon, in team order.
    """
    return [pair.member(side) for pair in team]
