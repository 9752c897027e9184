"""ABOUTME: Soul-link team building rules.
ABOUTME: Defines the SoulLinkConstraints model consumed by the combination search."""

from pydantic import BaseModel, ConfigDict, Field


class SoulLinkConstraints(BaseModel):
    """Exclusivity rules and team shape for a combination search."""

    model_config = ConfigDict(frozen=True)

    species_clause: bool = True
    """No two pairs in a team may share a species key on either side."""

    primary_type_clause: bool = True
    """No two pairs in a team may share a primary type on either side."""

    allow_custom_pokemon: bool = True
    """Whether pairs containing custom Pokemon are eligible at all."""

    team_size: int = Field(default=6, gt=0)
    """Number of pairs in every generated team."""

    required_pair_ids: frozenset[str] = frozenset()
    """Pair ids that must appear in every generated team."""
