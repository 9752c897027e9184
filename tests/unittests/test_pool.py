# ABOUTME: Unit tests for pair data classes and pool helpers.
# ABOUTME: Tests species/type sets of a pair, eligibility filtering, and player sides.

from soullink.team import LifeStatus, Pair, PlayerSide, Pokemon, eligible_pairs, side_members


def _pokemon(pokemon_id: str, primary_type: str | None = "normal", custom: bool = False) -> Pokemon:
    return Pokemon(
        id=pokemon_id,
        name=pokemon_id.title(),
        species_key=pokemon_id,
        primary_type=primary_type,
        custom=custom,
    )


class TestPair:
    """Tests for Pair properties."""

    def test_species_keys(self) -> None:
        """Species keys of both members are combined."""
        pair = Pair(id="p", player1=_pokemon("pidgey"), player2=_pokemon("rattata"))

        assert pair.species_keys == {"pidgey", "rattata"}

    def test_primary_types_lowercased(self) -> None:
        """Primary types are lowercased and missing ones are left out."""
        pair = Pair(id="p", player1=_pokemon("a", "Fire"), player2=_pokemon("b", None))

        assert pair.primary_types == {"fire"}

    def test_default_status_alive(self) -> None:
        """New pairs are alive."""
        pair = Pair(id="p", player1=_pokemon("a"), player2=_pokemon("b"))

        assert pair.is_alive
        assert not pair.has_custom

    def test_member(self) -> None:
        """member() returns the requested player's Pokemon."""
        pair = Pair(id="p", player1=_pokemon("a"), player2=_pokemon("b"))

        assert pair.member(PlayerSide.PLAYER1).id == "a"
        assert pair.member(PlayerSide.PLAYER2).id == "b"


class TestPokemonTypes:
    """Tests for Pokemon.types."""

    def test_dual_type(self) -> None:
        """Both types are returned lowercase, primary first."""
        pokemon = Pokemon(id="1", name="Zubat", species_key="zubat", primary_type="Poison", secondary_type="Flying")

        assert pokemon.types == ("poison", "flying")

    def test_same_type_twice(self) -> None:
        """A repeated type is listed once."""
        pokemon = Pokemon(id="1", name="X", species_key="x", primary_type="Fire", secondary_type="fire")

        assert pokemon.types == ("fire",)


class TestEligiblePairs:
    """Tests for eligible_pairs."""

    def _pairs(self) -> list[Pair]:
        return [
            Pair(id="alive", player1=_pokemon("a1"), player2=_pokemon("a2")),
            Pair(id="dead", player1=_pokemon("d1"), player2=_pokemon("d2"), status=LifeStatus.DEAD),
            Pair(id="custom", player1=_pokemon("c1"), player2=_pokemon("c2", custom=True)),
            Pair(id="alive2", player1=_pokemon("b1"), player2=_pokemon("b2")),
        ]

    def test_dead_pairs_removed(self) -> None:
        """Dead pairs are never eligible."""
        assert [p.id for p in eligible_pairs(self._pairs())] == ["alive", "custom", "alive2"]

    def test_custom_pairs_removed_when_disallowed(self) -> None:
        """Pairs with a custom member are dropped if custom Pokemon are not allowed."""
        result = eligible_pairs(self._pairs(), allow_custom_pokemon=False)

        assert [p.id for p in result] == ["alive", "alive2"]


class TestSideMembers:
    """Tests for side_members."""

    def test_player_two(self) -> None:
        """Player 2's half of every pair is returned in team order."""
        team = [
            Pair(id="x", player1=_pokemon("x1"), player2=_pokemon("x2")),
            Pair(id="y", player1=_pokemon("y1"), player2=_pokemon("y2")),
        ]

        assert [p.id for p in side_members(team, PlayerSide.PLAYER2)] == ["x2", "y2"]
