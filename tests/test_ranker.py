"""
Tests for track recommendation ranking.

INVARIANT: Order is primary desc, secondary desc, then name ascending.
Candidates missing a stat rank as 0 and are never dropped.
"""

import pytest

from gridledger.analysis.ranker import (
    Candidate,
    rank_candidates,
    recommend_boosts,
    recommend_drivers,
)
from gridledger.models.catalog import BonusModifier, OwnershipRecord, Track
from gridledger.models.failure import InvalidInputError


def _names(ranked) -> list[str]:
    return [item.name for item in ranked]


# =============================================================================
# CANDIDATE RANKING
# =============================================================================


class TestRankCandidates:
    """Tests for the ordering rules."""

    def test_primary_descending(self) -> None:
        candidates = [
            Candidate("A", {"blocking": 1}),
            Candidate("B", {"blocking": 3}),
            Candidate("C", {"blocking": 2}),
        ]
        assert _names(rank_candidates(candidates, "blocking", "speed")) == ["B", "C", "A"]

    def test_secondary_breaks_primary_tie(self) -> None:
        candidates = [
            Candidate("A", {"blocking": 3, "speed": 1}),
            Candidate("B", {"blocking": 3, "speed": 5}),
        ]
        assert _names(rank_candidates(candidates, "blocking", "speed")) == ["B", "A"]

    def test_name_breaks_full_tie(self) -> None:
        candidates = [
            Candidate("Slipstream", {"blocking": 3, "speed": 2}),
            Candidate("Overdrive", {"blocking": 3, "speed": 2}),
        ]
        assert _names(rank_candidates(candidates, "blocking", "speed")) == [
            "Overdrive",
            "Slipstream",
        ]

    def test_name_order_is_case_sensitive(self) -> None:
        candidates = [Candidate("apex", {}), Candidate("Zenith", {})]
        assert _names(rank_candidates(candidates, "blocking", "speed")) == ["Zenith", "apex"]

    def test_resolves_aliases(self) -> None:
        candidates = [
            Candidate("A", {"tyreUse": 1, "powerUnit": 9}),
            Candidate("B", {"tyreUse": 5, "powerUnit": 1}),
        ]
        assert _names(rank_candidates(candidates, "Tyre Use", "power")) == ["B", "A"]

    def test_missing_stats_rank_as_zero(self) -> None:
        candidates = [Candidate("A", {}), Candidate("B", {"blocking": 1})]
        assert _names(rank_candidates(candidates, "blocking", "speed")) == ["B", "A"]

    def test_unresolved_attribute_keeps_everyone(self) -> None:
        candidates = [Candidate("B", {"blocking": 1}), Candidate("A", {"blocking": 2})]
        ranked = rank_candidates(candidates, "downforce", "grip")
        assert _names(ranked) == ["A", "B"]

    def test_does_not_modify_input(self) -> None:
        candidates = [Candidate("B", {"blocking": 1}), Candidate("A", {"blocking": 2})]
        rank_candidates(candidates, "blocking", "speed")
        assert _names(candidates) == ["B", "A"]

    def test_empty(self) -> None:
        assert rank_candidates([], "blocking", "speed") == []


# =============================================================================
# RECOMMENDATIONS
# =============================================================================


class TestRecommendBoosts:
    """Tests for boost recommendations."""

    @pytest.fixture
    def boosts(self, make_boost):
        return [
            make_boost("b1", name="Boost1", icon="BoostIcon_Slipstream", blocking=3, speed=1),
            make_boost("b2", name="Boost2", custom_name="Wall", blocking=3, speed=4),
            make_boost("b3", name="Boost3", overtaking=5),
        ]

    def test_ranked_for_track(self, boosts) -> None:
        track = Track("Monaco", driver_stat="block", car_stat="speed")
        ranked = recommend_boosts(boosts, track)

        assert _names(ranked) == ["Wall", "Slipstream", "Boost3"]
        assert ranked[0].primary_value == 3
        assert ranked[0].secondary_value == 4

    def test_unowned_boosts_ranked_at_level_one(self, boosts) -> None:
        ranked = recommend_boosts(boosts, Track("Monza"))
        assert {rec.level for rec in ranked} == {1}

    def test_owned_level_used(self, boosts) -> None:
        ownership = {"b1": OwnershipRecord(level=4)}
        ranked = recommend_boosts(boosts, Track("Monza"), ownership)
        levels = {rec.entry.id: rec.level for rec in ranked}
        assert levels == {"b1": 4, "b2": 1, "b3": 1}

    def test_negative_owned_level_rejected(self, boosts) -> None:
        ownership = {"b1": OwnershipRecord(level=-3)}
        with pytest.raises(InvalidInputError):
            recommend_boosts(boosts, Track("Monza"), ownership)

    def test_shared_ids_keep_their_own_stats(self, make_boost) -> None:
        boosts = [
            make_boost("x", name="Low", blocking=1),
            make_boost("x", name="High", blocking=5),
        ]
        ranked = recommend_boosts(boosts, Track("Monza"))

        assert _names(ranked) == ["High", "Low"]
        assert [rec.primary_value for rec in ranked] == [5, 1]

    def test_limit(self, boosts) -> None:
        ranked = recommend_boosts(boosts, Track("Monza"), limit=1)
        assert _names(ranked) == ["Wall"]

    def test_rejects_non_boosts(self, make_driver) -> None:
        with pytest.raises(InvalidInputError):
            recommend_boosts([make_driver("d1", blocking=2)], Track("Monza"))


class TestRecommendDrivers:
    """Tests for driver recommendations."""

    @pytest.fixture
    def drivers(self, make_driver):
        return [
            make_driver("d1", name="Ada", blocking=10, step=0),
            make_driver("d2", name="Bea", blocking=8, step=5),
            make_driver("d3", name="Cal", blocking=50, step=0),
        ]

    def test_ranked_at_current_level(self, drivers) -> None:
        ownership = {"d1": OwnershipRecord(level=1), "d2": OwnershipRecord(level=2)}
        ranked = recommend_drivers(drivers, Track("Monaco"), ownership)

        # Bea: 8 + 5 at level 2; Cal is locked
        assert _names(ranked) == ["Bea", "Ada", "Cal"]
        assert ranked[2].primary_value == 0

    def test_highest_level_mode(self, drivers) -> None:
        ownership = {"d3": OwnershipRecord(level=0, card_count=1)}
        ranked = recommend_drivers(drivers, Track("Monaco"), ownership, show_highest=True)
        assert ranked[0].name == "Cal"
        assert ranked[0].level == 1

    def test_bonus(self, drivers) -> None:
        ownership = {"d1": OwnershipRecord(level=1), "d2": OwnershipRecord(level=1)}
        bonus = BonusModifier(percentage=10, applies_to=frozenset({"d2"}))
        ranked = recommend_drivers(drivers, Track("Monaco"), ownership, bonus=bonus)

        # Bea: ceil(8 * 1.1) = 9 < 10
        assert _names(ranked)[:2] == ["Ada", "Bea"]
        assert ranked[1].primary_value == 9

    def test_rejects_non_drivers(self, make_boost) -> None:
        with pytest.raises(InvalidInputError):
            recommend_drivers([make_boost("b1", blocking=1)], Track("Monza"), {})
