"""
Tests for seed normalization — positional seeding and stable seed order.
"""

from athlos.services.seed_normalizer import Participant, normalize_participants


class TestSeedFill:
    """Missing seeds come from 1-based input position."""

    def test_fills_missing_seeds_and_sorts(self):
        normalized = normalize_participants([
            Participant(id="athlete-1", seed=5),
            Participant(id="athlete-2"),
            Participant(id="athlete-3", seed=2),
        ])
        # athlete-2 is at position 1 -> seed 2, ties with athlete-3 (seed 2)
        # but athlete-2 came first in input
        assert [p.id for p in normalized] == ["athlete-2", "athlete-3", "athlete-1"]
        assert [p.seed for p in normalized] == [2, 2, 5]

    def test_unseeded_field_keeps_input_order(self):
        participants = [Participant(id=f"a{i}") for i in range(1, 6)]
        normalized = normalize_participants(participants)
        assert [p.id for p in normalized] == ["a1", "a2", "a3", "a4", "a5"]
        assert [p.seed for p in normalized] == [1, 2, 3, 4, 5]

    def test_every_output_has_seed_and_is_sorted(self):
        participants = [
            Participant(id="a", seed=9),
            Participant(id="b"),
            Participant(id="c", seed=1),
            Participant(id="d"),
            Participant(id="e", seed=3),
        ]
        normalized = normalize_participants(participants)
        seeds = [p.seed for p in normalized]
        assert all(s is not None for s in seeds)
        assert seeds == sorted(seeds)

    def test_club_carried_through(self):
        normalized = normalize_participants([Participant(id="a", club="Bushido")])
        assert normalized[0].club == "Bushido"
        assert normalized[0].seed == 1


class TestStability:
    """Equal seeds keep their relative input order."""

    def test_explicit_tie_preserves_order(self):
        normalized = normalize_participants([
            Participant(id="z", seed=3),
            Participant(id="y", seed=1),
            Participant(id="x", seed=3),
            Participant(id="w", seed=3),
        ])
        assert [p.id for p in normalized] == ["y", "z", "x", "w"]


class TestNoMutation:

    def test_input_untouched(self):
        participants = [Participant(id="b", seed=2), Participant(id="a")]
        snapshot = list(participants)
        normalized = normalize_participants(participants)
        assert participants == snapshot
        assert participants[1].seed is None
        assert normalized is not participants

    def test_returns_new_records(self):
        participants = [Participant(id="b", seed=2), Participant(id="a", seed=1)]
        normalized = normalize_participants(participants)
        assert normalized == [participants[1], participants[0]]
        assert all(n is not p for n in normalized for p in participants)


class TestEdgeCases:

    def test_empty(self):
        assert normalize_participants([]) == []

    def test_single(self):
        assert normalize_participants([Participant(id="a")]) == [Participant(id="a", seed=1)]

    def test_duplicate_ids_not_rejected(self):
        normalized = normalize_participants([Participant(id="a"), Participant(id="a")])
        assert [p.id for p in normalized] == ["a", "a"]

    def test_non_positive_seeds_pass_through(self):
        normalized = normalize_participants([Participant(id="a", seed=0), Participant(id="b", seed=-2)])
        assert [p.seed for p in normalized] == [-2, 0]
